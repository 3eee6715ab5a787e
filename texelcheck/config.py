import os
import logging

debug = False
max_reported_mismatches = 64

texelcheck_debug_env = "TEXELCHECK_DEBUG"
texelcheck_max_mismatches_env = "TEXELCHECK_MAX_MISMATCHES"

if os.environ.get(texelcheck_debug_env, "0") not in ("", "0"):
    debug = True

if texelcheck_max_mismatches_env in os.environ:
    max_reported_mismatches = int(os.environ[texelcheck_max_mismatches_env])


def _apply_debug():
    logging.getLogger("texelcheck").setLevel(
        logging.DEBUG if debug else logging.NOTSET
    )


def set_debug(enable):
    global debug
    debug = enable
    _apply_debug()


def set_max_reported_mismatches(count):
    global max_reported_mismatches
    max_reported_mismatches = count


_apply_debug()
