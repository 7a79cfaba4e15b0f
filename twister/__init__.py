"""
twister64 api
"""
#generator
from .MersenneTwister64 import MersenneTwister64

#twister_sample.py
from .TwisterPreset import TwisterPreset
from .TwisterSample import TwisterSample
from .TwisterTools import TwisterTools
from .SampleStats import SampleStats
from .NoiseImage import NoiseImage

__all__ = [
	"MersenneTwister64",
	"NoiseImage",
	"SampleStats",
	"TwisterPreset",
	"TwisterSample",
	"TwisterTools",
]
