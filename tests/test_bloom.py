import pytest

from lzrender.bloom import Bloom, PassKind, TargetRole


def test_mip_levels_for_power_of_two_size():
    bloom = Bloom(32 * 2**3, 32 * 2**3, 32)
    assert bloom.mip_levels == 3
    assert len(bloom.down_samples) == bloom.mip_levels
    assert len(bloom.up_samples) == bloom.mip_levels - 1


def test_mip_levels_use_smaller_dimension():
    bloom = Bloom(32 * 2**6, 32 * 2**4, 32)
    assert bloom.mip_levels == 4


def test_default_parameters():
    bloom = Bloom(512, 512)
    assert bloom.threshold == 1.0
    assert bloom.bloom_radius == 0.1
    assert bloom.bloom_attenuation == 1.0
    assert bloom.bloom_intensity == 1.0


def test_down_samples_halve_each_level():
    bloom = Bloom(1920, 1080)
    assert bloom.down_samples[0].size == (1920, 1080)
    for prev, cur in zip(bloom.down_samples, bloom.down_samples[1:]):
        assert cur.width == prev.width // 2
        assert cur.height == prev.height // 2


def test_last_up_sample_matches_full_resolution():
    bloom = Bloom(1024, 512, 16)
    assert bloom.up_samples[-1].size == (1024, 512)
    for prev, cur in zip(bloom.up_samples, bloom.up_samples[1:]):
        assert cur.width == prev.width * 2


def test_pass_sequence_shape():
    bloom = Bloom(256, 256, 32)
    passes = bloom.passes()
    n = bloom.mip_levels
    assert len(passes) == 2 * n + 1
    kinds = [p.kind for p in passes]
    assert kinds[0] is PassKind.COPY
    assert kinds[1] is PassKind.EXTRACT_BRIGHT
    assert kinds[2 : 2 + n - 1] == [PassKind.DOWN_SAMPLE] * (n - 1)
    assert kinds[-1] is PassKind.MERGE


def test_up_sample_targets_match_higher_resolution_input():
    bloom = Bloom(640, 480, 20)
    ups = [p for p in bloom.passes() if p.kind is PassKind.UP_SAMPLE]
    assert [p.target for p in ups] == bloom.up_samples
    for p in ups:
        lower, higher = p.inputs
        assert p.target.size == higher.size
        assert higher.role is TargetRole.DOWN
    assert ups[0].inputs[0] == bloom.down_samples[-1]
    for prev, cur in zip(ups, ups[1:]):
        assert cur.inputs[0] == prev.target


def test_merge_writes_back_to_source():
    bloom = Bloom(800, 600)
    bloom.bloom_intensity = 2.5
    merge = bloom.passes()[-1]
    assert merge.target.role is TargetRole.SOURCE
    assert merge.inputs == (bloom.origin, bloom.up_samples[-1])
    assert merge.uniforms["bloomIntensity"] == 2.5


def test_extract_uses_threshold():
    bloom = Bloom(128, 128, 16)
    bloom.threshold = 0.75
    extract = bloom.passes()[1]
    assert extract.target == bloom.down_samples[0]
    assert extract.uniforms["threshold"] == 0.75


def test_too_few_levels_raise_on_passes():
    bloom = Bloom(64, 64, 32)
    assert bloom.mip_levels < 2
    with pytest.raises(ValueError):
        bloom.passes()


def test_non_positive_size_rejected():
    with pytest.raises(ValueError):
        Bloom(0, 100)