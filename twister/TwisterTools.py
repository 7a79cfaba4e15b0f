"""Namespace for misc tools used by twister"""

import os
import numpy as np

from .MersenneTwister64 import MersenneTwister64


class TwisterTools:
	### Constants ###
	OUTPUT_FORMATS = ("int", "hex", "float")
	U64_HEX_DIGITS = 16

	### Parsing ###

	@staticmethod
	def strToBool(s):
		return True if str(s).lower() in ["true", "1", "yes"] else False

	@staticmethod
	def parseSeed(s):
		"""int parseSeed(str s) decimal or 0x prefixed hex"""
		return int(str(s).strip(), 0)

	### Formatting ###

	@staticmethod
	def formatValue(value: int, output_format: str = "int"):
		"""str formatValue(int value, str output_format)"""
		return TwisterTools.formatValues(np.array([value], dtype=np.uint64), output_format)[0]

	@staticmethod
	def formatValues(values: np.ndarray, output_format: str = "int"):
		if output_format == "float":
			return [repr(v) for v in MersenneTwister64.toUnitFloat(values).tolist()]
		if output_format == "hex":
			return ["0x{:0{}x}".format(v, TwisterTools.U64_HEX_DIGITS) for v in values.tolist()]
		return [str(v) for v in values.tolist()]

	### Files ###

	@staticmethod
	def validateOutputList(file_list: list[str]):
		"""bool validateOutputList(str[] file_list) None entries are optional and skipped"""
		preset_success = True
		for file in file_list:

			if file is None:
				continue
			if file == '':
				print("Undefined file")
				preset_success = False
				continue

			#directory
			base_dir = os.path.dirname(file)
			base_dir = "./" if base_dir=='' else base_dir
			if not os.path.isdir(base_dir):
				print("Directory doesn't exist " + base_dir)
				preset_success = False
				continue
			if not os.access(base_dir, os.W_OK):
				print("Can't access directory "+base_dir)
				preset_success = False
				continue

			#existing file must be writable
			if os.path.exists(file) and not os.access(file, os.W_OK):
				print("Can't access file "+file)
				preset_success = False

		return preset_success
