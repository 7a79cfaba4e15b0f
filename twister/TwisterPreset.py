#TwisterPreset.py
from dataclasses import dataclass
import numpy as np

from .TwisterTools import TwisterTools

### Sampler preset ###
@dataclass
class TwisterPreset:
	"""Preset for TwisterSample"""

	seed: int = 5489 # [0,UINT64_MAX], larger ints wrap
	y: int = 0 # xor'd into seed

	count: int = 10 # values to output
	skip: int = 0 # values discarded before output

	output_format: str = "int" # "int", "hex" or "float"

	#File i/o
	output: str = None # (optional) text file, one value per line
	image: str = None # (optional) .png noise image path
	image_width: int = 256
	image_height: int = 256

	print_stats: bool = False
	logging: bool = False #Enables progress printing

	valid: bool = False

	def __post_init__(self):

		#var sanity checks
		if self.count < 1:
			print("count must be positive, defaulting to 10")
			self.count = 10

		self.skip = max(0, self.skip)
		self.image_width = max(1, self.image_width)
		self.image_height = max(1, self.image_height)

		self.output_format = str(self.output_format).lower()
		if self.output_format not in TwisterTools.OUTPUT_FORMATS:
			print("Invalid output_format "+self.output_format+". Defaulting to int")
			self.output_format = "int"

		#seeds must be integers
		seeds_valid = True
		for name, value in (("seed", self.seed), ("y", self.y)):
			if not isinstance(value, (int, np.integer)):
				print("Invalid "+name+" "+repr(value)+", must be an integer")
				seeds_valid = False

		#file validity check
		files_valid = TwisterTools.validateOutputList([self.output, self.image])

		self.valid = seeds_valid and files_valid
