import logging
from collections import namedtuple

from . import config, TextureDescriptorException

logger = logging.getLogger(__name__)

TexelMismatch = namedtuple(
    "TexelMismatch",
    (
        "subresource",
        "mip_level",
        "array_layer",
        "x",
        "y",
        "z",
        "channel",
        "actual",
        "expected",
    ),
)


def generate_texture_data(descriptor, codec):
    for _, mip_level, array_layer, layout in descriptor.iter_subresources():
        for x, y, z in layout.coordinates():
            codec.initialize(layout.block_at(x, y, z), x, y, z, mip_level, array_layer)
    logger.debug("generated %r using %r", descriptor, codec)


def compare_blocks(codec, actual, expected):
    return codec.compare(actual, expected)


def compare_texture_data(codec, actual, expected):
    """Compare every texel of actual against the expected descriptor.

    actual is a list of SubresourceLayout, one per subresource index of
    expected, usually wrapping device readback memory. Yields a TexelMismatch
    for every channel that differs, stopping after
    config.max_reported_mismatches records (0 for no limit).
    """
    if len(actual) != expected.subresource_count:
        raise TextureDescriptorException(
            "expected {0} subresources, got {1}".format(
                expected.subresource_count, len(actual)
            )
        )

    reported = 0
    for index, mip_level, array_layer, expected_layout in expected.iter_subresources():
        actual_layout = actual[index]
        if tuple(actual_layout.extents) != tuple(expected_layout.extents):
            raise TextureDescriptorException(
                "subresource {0} extents {1} do not match {2}".format(
                    index, tuple(actual_layout.extents), tuple(expected_layout.extents)
                )
            )
        for x, y, z in expected_layout.coordinates():
            for mismatch in codec.compare(
                actual_layout.block_at(x, y, z), expected_layout.block_at(x, y, z)
            ):
                yield TexelMismatch(
                    index,
                    mip_level,
                    array_layer,
                    x,
                    y,
                    z,
                    mismatch.channel,
                    mismatch.actual,
                    mismatch.expected,
                )
                reported += 1
                if reported == config.max_reported_mismatches:
                    logger.info(
                        "stopped comparing %r after %d mismatches", expected, reported
                    )
                    return
