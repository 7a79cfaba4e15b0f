#!/usr/bin/env python
"""
Print known-answer values for tests/test_generator.py
Scalar, loop by loop twist kept separate from the vectorized MersenneTwister64
"""

import argparse

import sys
from pathlib import Path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from twister import MersenneTwister64

MASK = 2**64-1
N = 312
M = 156


def mix(a, b):
	combined = (a & 0xffffffff80000000) | (b & 0x7fffffff)
	return (combined >> 1) ^ ((combined & 1) * 0xb5026f5aa96619e9)

def seedState(seed, y=0):
	x = (seed ^ y) & MASK
	state = [x]
	for i in range(1, N):
		x = (((x ^ (x >> 62)) * 6364136223846793005) + i) & MASK
		state.append(x)
	return state

def regenerate(state):
	carry = state[0]
	for i in range(0, M):
		nxt = state[i+1]
		state[i] = state[i+M] ^ mix(carry, nxt)
		carry = nxt
	for i in range(M, N-1):
		nxt = state[i+1]
		state[i] = state[i-M] ^ mix(carry, nxt)
		carry = nxt
	#wraparound, last word stands in for index 0
	state[N-1] = state[N-1-M] ^ mix(carry, state[N-1])

def temper(raw):
	raw ^= (raw >> 29) & 0x5555555555555555
	raw ^= (raw << 17) & 0x71d67fffeda60000
	raw ^= (raw << 37) & 0xfff7eee000000000
	raw ^= raw >> 43
	return raw

def referenceSequence(seed, y, count):
	state = seedState(seed, y)
	values = []
	index = N
	for _ in range(count):
		if index >= N:
			regenerate(state)
			index = 0
		values.append(temper(state[index]))
		index += 1
	return values


def calc_referenceVector(seed, y, count):
	values = referenceSequence(seed, y, count)
	print("# seed="+str(seed)+" y="+str(y))
	print("FIRST_VALUES = [")
	for v in values[:5]:
		print("\t"+str(v)+",")
	print("]")
	for idx in (N-2, N-1, N, N+1, 2*N-1, 2*N):
		if idx < count:
			print("VALUE_"+str(idx)+" = "+str(values[idx]))
	xor_all = 0
	for v in values:
		xor_all ^= v
	print("XOR_"+str(count)+" = "+str(xor_all))

def calc_vectorizedMatches(seed, y, count):
	rand = MersenneTwister64(seed, y)
	vectorized = rand.randomInt((count,)).tolist()
	matches = vectorized == referenceSequence(seed, y, count)
	print("# vectorized MersenneTwister64 matches: "+str(matches))


if __name__ == '__main__':
	parser = argparse.ArgumentParser(description="Print MersenneTwister64 known-answer values")
	parser.add_argument('-s', '--seed', type=lambda s: int(s, 0), default=5489)
	parser.add_argument('-y', '--y', type=lambda s: int(s, 0), default=0)
	parser.add_argument('-n', '--count', type=int, default=1000)
	arg_list = parser.parse_args()

	calc_referenceVector(arg_list.seed, arg_list.y, arg_list.count)
	calc_vectorizedMatches(arg_list.seed, arg_list.y, arg_list.count)
