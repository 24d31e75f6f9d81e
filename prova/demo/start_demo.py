import argparse
import asyncio
import sys
import time

from aioconsole import ainput

from prova import config
from prova.errors import InvalidParameters, ProtocolError
from prova.models.parameters import DomainParameters, KeyPair
from prova.monitor import Monitor
from prova.protocol import run_session
from prova.utils.randomness import ScriptedRandomSource
from prova.zkp import GROUPS, get_domain_parameters


class DemoShell:
    def __init__(self, keypair: KeyPair, group: str, monitor: Monitor = None):
        self.keypair = keypair
        self.group = group
        self.monitor = monitor or Monitor()
        self.running = False

    def prove(self, attacker=False, prover_random=None, verifier_random=None):
        self.monitor.log_sent(self.group, is_attack=attacker)
        start = time.perf_counter()
        result = run_session(self.keypair, prover_random, verifier_random, attacker=attacker, verbose=True)
        self.monitor.log_result(self.group, result.accepted, time.perf_counter() - start, is_attack=attacker)
        return result

    def print_parameters(self):
        params = self.keypair.params
        print(f"[Demo] Group '{self.group}': p={params.p}, q={params.q}, g={params.g}")
        print(f"[Demo] Public key y = {self.keypair.public}")

    def print_status(self):
        self.print_parameters()
        self.monitor.report()

    async def handle_input(self):
        """Handle terminal commands"""
        self.running = True
        print("[Demo] Available commands: prove, attack, status, quit")

        while self.running:
            try:
                command = await ainput("Enter command:\n")
                command = command.strip().lower()

                if not command:
                    continue

                if command in {"quit", "exit"}:
                    print("[Demo] Shutting down...")
                    self.running = False
                elif command == "prove":
                    self.prove()
                elif command == "attack":
                    self.prove(attacker=True)
                elif command == "status":
                    self.print_status()
                else:
                    print("[Demo] Unknown command. Available: prove, attack, status, quit")

            except ProtocolError as e:
                print(f"[Demo] Protocol error: {e}")
            except EOFError:
                self.running = False


def build_parameters(args) -> DomainParameters:
    explicit = (args.p, args.g, args.q)
    if any(value is not None for value in explicit):
        if any(value is None for value in explicit):
            raise InvalidParameters("--p, --g and --q must be given together")
        return DomainParameters(args.p, args.g, args.q)
    return get_domain_parameters(args.group)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Schnorr identification protocol demonstration')
    parser.add_argument('--group', choices=sorted(GROUPS), default=config.DEFAULT_GROUP, help='Named domain parameters')
    parser.add_argument('--p', type=int, help='Prime modulus')
    parser.add_argument('--g', type=int, help='Generator')
    parser.add_argument('--q', type=int, help='Order of the generator')
    parser.add_argument('--secret', type=int, help='Secret x (generated when omitted)')
    parser.add_argument('--sessions', type=int, default=1, help='Number of proof sessions to run')
    parser.add_argument('--attacker', action='store_true', help='Prove with a secret that does not match y')
    parser.add_argument('--fixed-nonce', type=int, help='Use this r for the (single) session')
    parser.add_argument('--fixed-challenge', type=int, help='Use this c for the (single) session')
    parser.add_argument('--interactive', action='store_true', help='Read commands from the terminal')
    return parser.parse_args(argv)


async def main(argv=None):
    args = parse_args(argv)

    try:
        params = build_parameters(args)
        if args.secret is None:
            keypair = KeyPair.generate(params)
        else:
            keypair = KeyPair.from_secret(params, args.secret)

        group = args.group if args.p is None else "custom"
        shell = DemoShell(keypair, group)
        shell.print_parameters()

        if args.interactive:
            await shell.handle_input()
            return 0

        if (args.fixed_nonce is not None or args.fixed_challenge is not None) and args.sessions != 1:
            raise InvalidParameters("--fixed-nonce and --fixed-challenge only apply to a single session")

        prover_random = ScriptedRandomSource([args.fixed_nonce]) if args.fixed_nonce is not None else None
        verifier_random = ScriptedRandomSource([args.fixed_challenge]) if args.fixed_challenge is not None else None

        accepted = 0
        for i in range(args.sessions):
            print(f"\n[Demo] Session {i + 1}/{args.sessions}")
            result = shell.prove(args.attacker, prover_random, verifier_random)
            accepted += result.accepted

        print(f"\n[Demo] {accepted}/{args.sessions} proofs accepted")
        if args.attacker:
            return 0
        return 0 if accepted == args.sessions else 1

    except ProtocolError as e:
        print(f"[Demo] Error: {e}")
        return 1


def run():
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\n[Demo] Received interrupt signal, shutting down...")
        sys.exit(0)


if __name__ == "__main__":
    run()
