#!/usr/bin/env python3

import glob
import logging
import re
from typing import Any, Callable, TypeVar

LH = logging.getLogger('feeph.fanconfig')

T = TypeVar('T')


def probe(patterns: list[str], evaluate: Callable[..., T | None], **context: Any) -> list[T]:
    """
    expand the provided glob patterns and evaluate each match

     - a pattern which can't be expanded is skipped
     - a candidate whose evaluation fails with an OSError is skipped
     - a candidate evaluating to 'None' is dropped (e.g. declined by the user)

    Results are returned in pattern order, matches of the same pattern in
    sorted order. 'context' is passed on to 'evaluate' as keyword arguments.
    """
    results: list[T] = list()
    for pattern in patterns:
        try:
            paths = sorted(glob.glob(pattern))
        except (OSError, ValueError, re.error) as e:
            LH.warning("Unable to expand pattern '%s': %s Skipping.", pattern, e)
            continue
        LH.debug("Pattern '%s' matched %i path(s).", pattern, len(paths))
        for path in paths:
            try:
                result = evaluate(path, **context)
            except OSError as e:
                LH.warning("Unable to evaluate '%s': %s Skipping.", path, e)
                continue
            if result is not None:
                results.append(result)
    return results
