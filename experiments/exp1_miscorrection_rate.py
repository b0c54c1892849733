import csv
import sys
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from src.module1_hamming_codec import correct_bit, encode, position_from_syndrome, syndrome
from src.module2_error_injection import ErrorMode, NumpyRandomSource, apply_errors
from src.module3_simulation import load_config

# --------------------------------------------------
# Load config (packaged defaults)
# --------------------------------------------------
config = load_config()

TRIALS = 2000
SEED = 42

rng = NumpyRandomSource(SEED)

# --------------------------------------------------
# Monte-Carlo over every example and error mode
# --------------------------------------------------
print("example,mode,trials,detected,located,recovered")

results = []
for name, data in config["examples"].items():
    codeword = encode(data)

    for mode in ErrorMode:
        detected = located = recovered = 0

        for _ in range(TRIALS):
            result = apply_errors(codeword, mode, rng)
            position = position_from_syndrome(syndrome(result.received))

            detected += position != 0
            located += result.positions == [position]
            recovered += np.array_equal(correct_bit(result.received, position), codeword)

        row = (name, mode.value, TRIALS, detected, located, recovered)
        results.append(row)
        print(",".join(map(str, row)))

# --------------------------------------------------
# Save CSV
# --------------------------------------------------
OUT = Path("experiments/results_miscorrection_rate.csv")
OUT.parent.mkdir(exist_ok=True)

with open(OUT, "w", newline="") as f:
    writer = csv.writer(f)
    writer.writerow(["example", "mode", "trials", "detected", "located", "recovered"])
    writer.writerows(results)

print(f"Saved miscorrection results -> {OUT}")
