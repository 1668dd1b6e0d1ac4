import sys
import traceback

from golreach import GolReachError, RunConfig, run
from golreach.scenarios import BLINKER, GLIDER

dimension = 8

if len(sys.argv) > 1:
    dimension = int(sys.argv[1])

print(f"Board dimension: {dimension}")

results = {}
for scenario in (BLINKER, GLIDER):
    print(f"\n=== {scenario.upper()}: Symbolic Reachability ===")
    try:
        results[scenario] = run(RunConfig(scenario=scenario, dimension=dimension, verify=True))
    except GolReachError as e:
        print("[Error]", e)
    except Exception as e:
        print("\n[CRITICAL ERROR in Main Logic]")
        traceback.print_exc()
        print("Error details:", e)

print("\n=== Summary ===")
for scenario, result in results.items():
    verdict = "terminates" if result.verdict.terminates else "does not terminate"
    print(f"  {scenario:8s} | {verdict:18s} | solutions {result.verdict.solution_count:6d} "
          f"| {result.iterations} iterations | verified: {result.verified}")
