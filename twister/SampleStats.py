#SampleStats.py
import numpy as np
from scipy import stats

from .MersenneTwister64 import MersenneTwister64


class SampleStats:
	BIT_COUNT = 64

	@staticmethod
	def bitBalance(values):
		"""float[64] bitBalance(uint64[] values) share of ones per bit, index 0 = least significant"""
		values = np.asarray(values, dtype=np.uint64)
		bits = np.arange(SampleStats.BIT_COUNT, dtype=np.uint64)
		ones = (values[:,None] >> bits) & np.uint64(1)
		return ones.mean(axis=0)

	@staticmethod
	def uniformityStats(values, bins = 16):
		"""dict uniformityStats(uint64[] values, int bins = 16) None with fewer than 2 values"""
		values = np.asarray(values, dtype=np.uint64).ravel()
		if len(values)<2:
			return None

		unit_floats = MersenneTwister64.toUnitFloat(values)

		histogram, _ = np.histogram(unit_floats, bins=bins, range=(0.0, 1.0))
		chi2, chi2_p = stats.chisquare(histogram)
		ks, ks_p = stats.kstest(unit_floats, "uniform")

		return {
			"count": len(values),
			"mean": float(np.mean(unit_floats)),
			"chi2": float(chi2),
			"chi2_p": float(chi2_p),
			"ks": float(ks),
			"ks_p": float(ks_p),
			"bit_balance": SampleStats.bitBalance(values),
		}

	@staticmethod
	def printUniformityStats(values, bins = 16, precision = 4):
		"""void printUniformityStats(uint64[] values, int bins = 16, int precision = 4)"""
		sample_stats = SampleStats.uniformityStats(values, bins)
		if sample_stats is None:
			return

		bit_balance = sample_stats["bit_balance"]
		worst_bit = int(np.argmax(np.abs(bit_balance - 0.5)))

		print("Samples: "+str(sample_stats["count"]))
		print("Mean: "		+str(round( sample_stats["mean"], precision )) + " (expected 0.5)")
		print("Chi2: "		+str(round( sample_stats["chi2"], precision )) + " p="+str(round(sample_stats["chi2_p"], precision)))
		print("KS: "		+str(round( sample_stats["ks"], precision )) + " p="+str(round(sample_stats["ks_p"], precision)))
		print("Worst bit "+str(worst_bit)+" ones ratio "+str(round(float(bit_balance[worst_bit]), precision)))
		print("")
