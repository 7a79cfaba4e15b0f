"""Sample statistics and noise image output."""

import numpy as np
from PIL import Image

from twister import MersenneTwister64, NoiseImage, SampleStats


def test_uniformity_stats_on_large_sample():
    values = MersenneTwister64(5489).randomInt((20000,))
    sample_stats = SampleStats.uniformityStats(values)

    assert sample_stats["count"] == 20000
    assert abs(sample_stats["mean"] - 0.5) < 0.01
    assert sample_stats["chi2_p"] > 1e-4
    assert sample_stats["ks_p"] > 1e-4
    assert sample_stats["bit_balance"].shape == (64,)
    assert np.all(np.abs(sample_stats["bit_balance"] - 0.5) < 0.05)


def test_uniformity_stats_flags_constant_sample():
    values = np.full(1000, 2**63, dtype=np.uint64)
    sample_stats = SampleStats.uniformityStats(values)

    assert sample_stats["chi2_p"] < 1e-6
    assert sample_stats["ks_p"] < 1e-6


def test_uniformity_stats_needs_two_values():
    assert SampleStats.uniformityStats(np.array([1], dtype=np.uint64)) is None
    assert SampleStats.uniformityStats([]) is None


def test_bit_balance_counts_ones_per_bit():
    balance = SampleStats.bitBalance(np.array([1, 3], dtype=np.uint64))

    assert balance[0] == 1.0
    assert balance[1] == 0.5
    assert np.all(balance[2:] == 0.0)


def test_print_uniformity_stats(capsys):
    SampleStats.printUniformityStats(MersenneTwister64(1).randomInt((500,)))
    captured = capsys.readouterr()

    assert "Samples: 500" in captured.out
    assert "Chi2: " in captured.out
    assert "Worst bit " in captured.out


def test_noise_image_pixels_are_top_bytes():
    img = NoiseImage.fromGenerator(MersenneTwister64(5489), 8, 4)
    reference = MersenneTwister64(5489)
    expected = [reference.next() >> 56 for _ in range(32)]

    assert img.size == (8, 4)
    assert img.mode == "L"
    assert np.asarray(img).ravel().tolist() == expected
    assert expected[0] == 201


def test_noise_image_save(tmp_path):
    path = tmp_path / "noise.png"
    saved = NoiseImage.save(MersenneTwister64(3), str(path), 16, 16)

    assert path.exists()
    with Image.open(path) as loaded:
        assert loaded.size == (16, 16)
        assert np.array_equal(np.asarray(loaded), np.asarray(saved))
