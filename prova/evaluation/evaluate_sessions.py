import argparse
import asyncio
import csv
import statistics
import time
from pathlib import Path

from prova import config
from prova.models.parameters import KeyPair
from prova.monitor import Monitor
from prova.protocol import run_session
from prova.zkp import GROUPS, get_domain_parameters


def _timed_session(keypair: KeyPair, group: str, monitor: Monitor, attacker: bool) -> bool:
    monitor.log_sent(group, is_attack=attacker)
    start = time.perf_counter()
    result = run_session(keypair, attacker=attacker)
    monitor.log_result(group, result.accepted, time.perf_counter() - start, is_attack=attacker)
    return result.accepted


async def run_evaluation(group=config.DEFAULT_GROUP, sessions=config.EVALUATION_SESSIONS,
                         concurrency=config.EVALUATION_CONCURRENCY, attack_ratio=0.0,
                         output_file=config.EVALUATION_OUTPUT, monitor: Monitor = None):
    """
    Runs many independent proof sessions for one key pair, concurrently.

    Args:
        group: Name of the domain parameters to use
        sessions: Number of proof sessions to run
        concurrency: Maximum number of sessions computed at the same time
        attack_ratio: Fraction of sessions run by a prover that does not know the secret
        output_file: CSV file the summary row is appended to, or None to skip writing

    Every session builds its own Prover and Verifier, so the only state they
    share is the thread-safe default random source.
    """
    params = get_domain_parameters(group)
    keypair = KeyPair.generate(params)
    monitor = monitor or Monitor()

    attacks = int(sessions * attack_ratio)
    semaphore = asyncio.Semaphore(concurrency)

    async def bounded(attacker: bool) -> bool:
        async with semaphore:
            return await asyncio.to_thread(_timed_session, keypair, group, monitor, attacker)

    start = time.perf_counter()
    outcomes = await asyncio.gather(*(bounded(i < attacks) for i in range(sessions)))
    elapsed = time.perf_counter() - start

    honest = outcomes[attacks:]
    forged = outcomes[:attacks]

    latencies = monitor.latencies
    avg_latency = statistics.mean(latencies) if latencies else 0
    std_dev = statistics.stdev(latencies) if len(latencies) > 1 else 0

    print(f"\n[Evaluation] Results for group '{group}':")
    print(f"[Evaluation] Total sessions: {len(outcomes)} ({len(forged)} impersonation attempts)")
    print(f"[Evaluation] Honest proofs accepted: {sum(honest)}/{len(honest)}")
    print(f"[Evaluation] Forged proofs accepted: {sum(forged)}/{len(forged)}")
    print(f"[Evaluation] Average latency: {avg_latency:.6f} seconds")
    print(f"[Evaluation] Standard deviation: {std_dev:.6f} seconds")
    print(f"[Evaluation] Wall time: {elapsed:.4f} seconds")

    results = {
        'group': group,
        'sessions': sessions,
        'concurrency': concurrency,
        'impersonation_attempts': len(forged),
        'honest_accepted': sum(honest),
        'forged_accepted': sum(forged),
        'avg_latency': f"{avg_latency:.6f}",
        'std_dev': f"{std_dev:.6f}",
        'wall_time': f"{elapsed:.4f}"
    }

    if output_file:
        csv_file = Path(output_file)
        csv_file.parent.mkdir(parents=True, exist_ok=True)
        # Check if file exists to determine if we need to write headers
        file_exists = csv_file.exists()

        with open(csv_file, 'a', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=results.keys())
            if not file_exists:
                writer.writeheader()
            writer.writerow(results)

    return results


async def main():
    parser = argparse.ArgumentParser(description='Run concurrent Schnorr identification sessions')
    parser.add_argument('--group', choices=sorted(GROUPS), default=config.DEFAULT_GROUP, help='Named domain parameters')
    parser.add_argument('--sessions', type=int, default=config.EVALUATION_SESSIONS, help='Number of sessions')
    parser.add_argument('--concurrency', type=int, default=config.EVALUATION_CONCURRENCY, help='Sessions in flight')
    parser.add_argument('--attack-ratio', type=float, default=0.0, help='Fraction of impersonation attempts')
    parser.add_argument('--output', default=config.EVALUATION_OUTPUT, help='CSV file to append results to')
    args = parser.parse_args()

    monitor = Monitor()
    await run_evaluation(args.group, args.sessions, args.concurrency, args.attack_ratio, args.output, monitor)
    monitor.report()


if __name__ == "__main__":
    asyncio.run(main())
