"""Run TwisterPreset through MersenneTwister64"""
import argparse

from .MersenneTwister64 import MersenneTwister64
from .TwisterPreset import TwisterPreset
from .TwisterTools import TwisterTools
from .SampleStats import SampleStats
from .NoiseImage import NoiseImage


class TwisterSample:

	# Public

	### Draw values ###

	@staticmethod
	def usePreset(preset: TwisterPreset):
		"""str[] usePreset(TwisterPreset preset) formatted values, also printed to stdout"""
		if not preset or not preset.valid:
			print("Invalid preset")
			return None

		rand = MersenneTwister64(preset.seed, preset.y)
		if preset.logging:
			print("Using seed "+TwisterTools.formatValue(rand.seed, "hex"))

		if preset.skip:
			rand.skip(preset.skip)

		rand_arr = rand.randomInt((preset.count,))
		lines = TwisterTools.formatValues(rand_arr, preset.output_format)
		for line in lines:
			print(line)

		if preset.output:
			with open(preset.output, "w") as out_file:
				out_file.write("\n".join(lines) + "\n")
			if preset.logging:
				print("Wrote "+str(len(lines))+" values to "+preset.output)

		#image continues the same stream after the printed values
		if preset.image:
			NoiseImage.save(rand, preset.image, preset.image_width, preset.image_height)
			if preset.logging:
				print("Saved image "+preset.image)

		if preset.print_stats:
			print("\nSample stats")
			SampleStats.printUniformityStats(rand_arr)

		return lines


	## Twister Sample Parser ##

	@staticmethod
	def parser(argv):

		parser = argparse.ArgumentParser(prog=argv[0],description="Print reproducible 64-bit values from MersenneTwister64")

		#all inputs arg_list are strings. Easier to convert str to X
		parser.add_argument(
			'-s', '--seed', type=str,
			default="5489",
			help="Seed, decimal or 0x hex"
		)
		parser.add_argument(
			'-y', '--y', type=str,
			default="0",
			help="Secondary seed xor'd into --seed"
		)
		parser.add_argument(
			'-n', '--count', type=str,
			default="10",
			help="Number of values to print"
		)
		parser.add_argument(
			'-k', '--skip', type=str,
			default="0",
			help="Values to discard before printing"
		)
		parser.add_argument(
			'-f', '--format', type=str,
			default="int",
			dest='output_format',
			help="Options: int, hex, float"
		)
		parser.add_argument(
			'-o', '--output', type=str,
			default=None,
			help="Also write values to this file, one per line"
		)
		parser.add_argument(
			'-I', '--image', type=str,
			default=None,
			help="Write a grayscale noise .png"
		)
		parser.add_argument(
			'-W', '--width', type=str,
			default="256",
			help="Noise image width"
		)
		parser.add_argument(
			'-H', '--height', type=str,
			default="256",
			help="Noise image height"
		)
		parser.add_argument(
			'-S', '--stats', type=str,
			default="False",
			dest='print_stats',
			help="Print uniformity stats of the printed values"
		)
		parser.add_argument(
			'-v', '--verbose', type=str,
			default="False",
			help="Print progress"
		)

		arg_list = parser.parse_args(argv[1:])

		try:
			seed = TwisterTools.parseSeed(arg_list.seed)
			y = TwisterTools.parseSeed(arg_list.y)
			count = int(arg_list.count)
			skip = int(arg_list.skip)
			width = int(arg_list.width)
			height = int(arg_list.height)
		except ValueError as err:
			print("Invalid number: "+str(err))
			return None

		#arg_list to preset
		d_preset = TwisterPreset(
			seed				= seed,
			y					= y,
			count				= count,
			skip				= skip,
			output_format	= str(arg_list.output_format),
			output			= arg_list.output,
			image				= arg_list.image,
			image_width		= width,
			image_height	= height,
			print_stats		= TwisterTools.strToBool(arg_list.print_stats),
			logging			= TwisterTools.strToBool(arg_list.verbose),
		)

		return d_preset if d_preset.valid else None
