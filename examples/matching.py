"""Assign workers to jobs with a traced max flow and print the matching."""

from flowtrace.applications.matching import max_bipartite_matching

workers = ["alice", "bob", "carol"]
jobs = ["build", "test", "deploy"]
can_do = [
    ("alice", "build"),
    ("alice", "test"),
    ("bob", "build"),
    ("carol", "test"),
    ("carol", "deploy"),
]

size, matches, trace = max_bipartite_matching(workers, jobs, can_do)
print(f"{size} assignments in {len(trace)} steps")
for worker, job in matches:
    print(f"  {worker} -> {job}")
