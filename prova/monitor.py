import threading
from collections import defaultdict


class Monitor:
    def __init__(self):
        self.honest_stats = defaultdict(lambda: {
            "sent": 0,
            "accepted": 0,
            "rejected": 0,
            "latencies": []
        })
        self.attack_stats = defaultdict(lambda: {
            "sent": 0,
            "accepted": 0,
            "rejected": 0,
            "latencies": []
        })

        self.latencies = []
        # sessions report from worker threads
        self._lock = threading.Lock()

    def log_sent(self, group, is_attack=False):
        stats = self.attack_stats if is_attack else self.honest_stats
        with self._lock:
            stats[group]["sent"] += 1

    def log_result(self, group, accepted, latency, is_attack=False):
        stats = self.attack_stats if is_attack else self.honest_stats
        with self._lock:
            if accepted:
                stats[group]["accepted"] += 1
            else:
                stats[group]["rejected"] += 1
            stats[group]["latencies"].append(latency)
            self.latencies.append(latency)

    def _print_table(self, title, stats):
        print(f"\n{'='*66}")
        print(f"{title.center(66)}")
        print(f"{'='*66}")
        print(f"{'Group':<12} {'Sent':<10} {'Accepted':<10} {'Rejected':<10} {'Avg latency (s)':<20}")
        print('-'*66)

        for group, data in sorted(stats.items()):
            latencies = data["latencies"]
            avg_latency = sum(latencies) / len(latencies) if latencies else 0
            print(f"{group:<12} {data['sent']:<10} {data['accepted']:<10} {data['rejected']:<10} {avg_latency:<20.6f}")
        print()

    def report(self):
        self._print_table("Honest prover sessions", self.honest_stats)
        self._print_table("Impersonation attempts", self.attack_stats)
