import numpy as np
from numba import njit


@njit
def MersenneTwister64_njitSeed(state: np.ndarray, x: np.uint64):
	"""Fill state with the seeding recurrence x = (x ^ x>>62) * mul + i, wrapping at 64 bits"""
	state[0] = x
	for i in range(1, state.shape[0]):
		x = (x ^ (x >> np.uint64(62))) * np.uint64(6364136223846793005) + np.uint64(i)
		state[i] = x
	return state


class MersenneTwister64:
	"""
		64-bit Mersenne Twister, 312 word state
		Output is a pure function of seed ^ y. Not thread-safe, not cryptographic.
	"""
	MASK = 2**64-1

	N = 312
	M = 156

	UPPER_MASK = np.uint64(0xffffffff80000000) #high 33 bits
	LOWER_MASK = np.uint64(0x000000007fffffff) #low 31 bits
	MATRIX_A = np.uint64(0xb5026f5aa96619e9)

	#tempering (shift, mask) pairs
	TEMPER_U = (29, 0x5555555555555555)
	TEMPER_S = (17, 0x71d67fffeda60000)
	TEMPER_T = (37, 0xfff7eee000000000)
	TEMPER_L = 43

	FLOAT_MASK = np.uint64(1023) << np.uint64(52)

	_state = None
	_index = None
	_seed = None

	def __init__(self, seed: int, y: int = 0):
		for value in (seed, y):
			if not isinstance(value, (int, np.integer)):
				raise ValueError("seed and y must be int or np.integer")

		self._seed = (int(seed) ^ int(y)) & self.MASK
		self._state = np.zeros(self.N, dtype=np.uint64)
		MersenneTwister64_njitSeed(self._state, np.uint64(self._seed))
		self._index = self.N #first next() regenerates

	@property
	def seed(self):
		"""Effective seed, seed ^ y. Pass it to a new instance to reproduce the stream"""
		return self._seed

	def _regenerate(self):
		"""
			Refill the whole state array, one epoch.
			Every mix() operand is a word from before the refill, and every feedback
			word past index M-1 was written in the first half, so both halves run as array ops.
		"""
		old = self._state.copy()

		#b operand is the next word; the last word pairs with itself
		nxt = np.empty_like(old)
		nxt[:-1] = old[1:]
		nxt[-1] = old[-1]

		combined = (old & self.UPPER_MASK) | (nxt & self.LOWER_MASK)
		twisted = (combined >> np.uint64(1)) ^ ((combined & np.uint64(1)) * self.MATRIX_A)

		#feedback is M ahead for the first M words, N-M behind for the rest
		self._state[:self.M] = old[self.M:] ^ twisted[:self.M]
		self._state[self.M:] = self._state[:self.N-self.M] ^ twisted[self.M:]
		self._index = 0

	@classmethod
	def _temper(cls, raw: int):
		raw ^= (raw >> cls.TEMPER_U[0]) & cls.TEMPER_U[1]
		raw ^= (raw << cls.TEMPER_S[0]) & cls.TEMPER_S[1]
		raw ^= (raw << cls.TEMPER_T[0]) & cls.TEMPER_T[1]
		raw ^= raw >> cls.TEMPER_L
		return raw

	@classmethod
	def _temperArray(cls, raw_arr: np.ndarray):
		"""In place _temper for uint64 arrays"""
		raw_arr ^= (raw_arr >> np.uint64(cls.TEMPER_U[0])) & np.uint64(cls.TEMPER_U[1])
		raw_arr ^= (raw_arr << np.uint64(cls.TEMPER_S[0])) & np.uint64(cls.TEMPER_S[1])
		raw_arr ^= (raw_arr << np.uint64(cls.TEMPER_T[0])) & np.uint64(cls.TEMPER_T[1])
		raw_arr ^= raw_arr >> np.uint64(cls.TEMPER_L)
		return raw_arr

	def next(self) -> int:
		"""Next 64-bit value as python int"""
		if self._index >= self.N:
			self._regenerate()

		raw = int(self._state[self._index])
		self._index += 1
		return self._temper(raw)

	def skip(self, count: int):
		"""Advance the stream by count values without tempering them"""
		remaining = int(count)
		while remaining > 0:
			if self._index >= self.N:
				self._regenerate()
			step = min(self.N - self._index, remaining)
			self._index += step
			remaining -= step

	def randomInt(self, shape: tuple):
		"""
			Draw prod(shape) values as uint64 array.
			Same values and same advance as calling next() that many times.
		"""
		count = int(np.prod(shape, dtype=int))
		rand_arr = np.empty(count, dtype=np.uint64)

		filled = 0
		while filled < count:
			if self._index >= self.N:
				self._regenerate()
			step = min(self.N - self._index, count - filled)
			rand_arr[filled:filled+step] = self._state[self._index:self._index+step]
			self._index += step
			filled += step

		return self._temperArray(rand_arr).reshape(shape)

	@classmethod
	def toUnitFloat(cls, rand_arr):
		"""float[] toUnitFloat(uint64[] rand_arr) top 52 bits as mantissa of [1,2), minus 1"""
		rand_arr = np.asarray(rand_arr, dtype=np.uint64)
		return (rand_arr >> np.uint64(12) | cls.FLOAT_MASK).view(np.float64) - 1.0

	def random(self, shape: tuple):
		"""randomInt(shape: tuple) -> normalized [0,1) """
		return self.toUnitFloat(self.randomInt(shape))

	def shuffle(self, arr):
		count = arr.shape[0]
		rand_arr = self.randomInt((count,))
		order = np.argsort(rand_arr, kind='stable')
		arr[:] = arr[order]

	def getState(self):
		"""(uint64[312] state, int cursor) snapshot"""
		return self._state.copy(), self._index

	def setState(self, state):
		"""Restore a getState() snapshot. Words must be integers in [0,UINT64_MAX]"""
		buf_state, index = state
		if np.ndim(buf_state) != 1 or len(buf_state) != self.N:
			raise ValueError("state must hold exactly "+str(self.N)+" words")

		#tolist() gives python ints for integer arrays, floats stay floats
		words = buf_state.tolist() if isinstance(buf_state, np.ndarray) else list(buf_state)
		for word in words:
			if not isinstance(word, (int, np.integer)):
				raise ValueError("state words must be integers, got "+repr(word))
			if not (0 <= int(word) <= self.MASK):
				raise ValueError("state word out of uint64 range: "+str(word))

		if not isinstance(index, (int, np.integer)):
			raise ValueError("cursor must be an integer, got "+repr(index))
		if not (0 <= int(index) <= self.N):
			raise ValueError("cursor must be in [0, "+str(self.N)+"]")

		self._state = np.array([int(word) for word in words], dtype=np.uint64)
		self._index = int(index)
