"""
Print reproducible 64-bit values from a seed
"""

import sys
from twister import TwisterSample

if __name__ == '__main__':
	argv = sys.argv[:]

	d_preset = TwisterSample.parser(argv)
	if d_preset:
		TwisterSample.usePreset(d_preset)
	else:
		sys.exit(1)
