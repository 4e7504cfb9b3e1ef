"""Mip-chain bloom: the framebuffer layout and the sequence of passes it runs."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

EXTRACT_BRIGHT_SHADER = (
    "assets/shaders/advanced/bloom/extractBright.vert",
    "assets/shaders/advanced/bloom/extractBright.frag",
)
UP_SAMPLE_SHADER = (
    "assets/shaders/advanced/bloom/upSample.vert",
    "assets/shaders/advanced/bloom/upSample.frag",
)
MERGE_SHADER = (
    "assets/shaders/advanced/bloom/merge.vert",
    "assets/shaders/advanced/bloom/merge.frag",
)


class TargetRole(enum.Enum):
    """Which framebuffer of the bloom chain a target is."""

    SOURCE = "source"
    ORIGIN = "origin"
    DOWN = "down"
    UP = "up"


@dataclass(frozen=True)
class Target:
    """An HDR colour framebuffer of the bloom chain."""

    role: TargetRole
    index: int
    width: int
    height: int

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)


class PassKind(enum.Enum):
    """Kind of work done by one bloom pass."""

    COPY = "copy"
    EXTRACT_BRIGHT = "extract_bright"
    DOWN_SAMPLE = "down_sample"
    UP_SAMPLE = "up_sample"
    MERGE = "merge"


@dataclass
class BloomPass:
    """One step: read ``inputs``, write ``target``, with the given shader uniforms."""

    kind: PassKind
    target: Target
    inputs: tuple[Target, ...]
    uniforms: dict[str, float | int] = field(default_factory=dict)


class Bloom:
    """Bloom over a chain of down-sampled and up-sampled framebuffers."""

    def __init__(self, width: int, height: int, min_resolution: int = 32) -> None:
        if width <= 0 or height <= 0 or min_resolution <= 0:
            raise ValueError("width, height and min_resolution must be positive")
        self.width = width
        self.height = height

        width_levels = math.log2(width / min_resolution)
        height_levels = math.log2(height / min_resolution)
        self.mip_levels = int(min(width_levels, height_levels))

        self.threshold = 1.0
        self.bloom_radius = 0.1
        self.bloom_attenuation = 1.0
        self.bloom_intensity = 1.0

        w, h = width, height
        self.down_samples: list[Target] = []
        for i in range(self.mip_levels):
            self.down_samples.append(Target(TargetRole.DOWN, i, w, h))
            w //= 2
            h //= 2

        w, h = 4 * w, 4 * h
        self.up_samples: list[Target] = []
        for i in range(self.mip_levels - 1):
            self.up_samples.append(Target(TargetRole.UP, i, w, h))
            w *= 2
            h *= 2

        self.origin = Target(TargetRole.ORIGIN, 0, width, height)
        self.source = Target(TargetRole.SOURCE, 0, width, height)

    def passes(self) -> list[BloomPass]:
        """The passes applied to the source framebuffer, in execution order."""
        if self.mip_levels < 2:
            raise ValueError(
                f"bloom needs at least 2 mip levels, got {self.mip_levels}"
            )
        downs, ups = self.down_samples, self.up_samples
        n = len(downs)

        result = [
            BloomPass(PassKind.COPY, self.origin, (self.source,)),
            BloomPass(
                PassKind.EXTRACT_BRIGHT,
                downs[0],
                (self.source,),
                {"srcTex": 0, "threshold": self.threshold},
            ),
        ]
        result.extend(
            BloomPass(PassKind.DOWN_SAMPLE, dst, (src,))
            for src, dst in zip(downs, downs[1:])
        )

        lower = downs[n - 1]
        for i, target in enumerate(ups):
            higher = downs[n - 2 - i]
            result.append(
                BloomPass(
                    PassKind.UP_SAMPLE,
                    target,
                    (lower, higher),
                    {
                        "lowerResTex": 0,
                        "higherResTex": 1,
                        "bloomRadius": self.bloom_radius,
                        "bloomAttenuation": self.bloom_attenuation,
                    },
                )
            )
            lower = target

        result.append(
            BloomPass(
                PassKind.MERGE,
                self.source,
                (self.origin, ups[-1]),
                {"originTex": 0, "bloomTex": 1, "bloomIntensity": self.bloom_intensity},
            )
        )
        return result