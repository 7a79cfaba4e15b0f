import numpy as np
from PIL import Image

from .MersenneTwister64 import MersenneTwister64


class NoiseImage:
	"""Grayscale white noise from the top byte of each generator output"""

	@staticmethod
	def fromGenerator(rand: MersenneTwister64, width: int, height: int):
		rand_arr = rand.randomInt((height, width))
		pixels = (rand_arr >> np.uint64(56)).astype(np.uint8)
		return Image.fromarray(pixels)

	@staticmethod
	def save(rand: MersenneTwister64, path: str, width: int = 256, height: int = 256):
		img = NoiseImage.fromGenerator(rand, width, height)
		img.save(path, format="PNG")
		return img
