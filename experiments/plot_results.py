import pandas as pd
import matplotlib.pyplot as plt
from pathlib import Path

CSV_PATH = Path("experiments/results_miscorrection_rate.csv")
OUT_PATH = Path("experiments/fig_recovery_vs_mode.png")

df = pd.read_csv(CSV_PATH)

print("CSV columns:", list(df.columns))

if "trials" not in df.columns:
    raise ValueError("No trials column found")

for column in ("detected", "located", "recovered"):
    df[f"{column}_rate"] = df[column] / df["trials"]

# --------------------------------------------------
# Plot: recovery rate per example, grouped by mode
# --------------------------------------------------
pivot = df.pivot(index="mode", columns="example", values="recovered_rate")
pivot = pivot.reindex(["single", "double", "triple"])

ax = pivot.plot(kind="bar", figsize=(8, 4), rot=0)
ax.set_xlabel("Injected error mode")
ax.set_ylabel("Fraction of words recovered")
ax.set_ylim(0, 1.05)
ax.set_title("Hamming Single-Error Correction vs Number of Bit Errors")
ax.grid(True, axis="y")
plt.tight_layout()

plt.savefig(OUT_PATH, dpi=200)
plt.show()

print(f"Saved plot -> {OUT_PATH}")
