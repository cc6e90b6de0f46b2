"""Fetching .vox file bytes from disk or over HTTP."""

import logging
import os
from typing import Union

import requests

from voxreader.errors import SourceError

logger = logging.getLogger(__name__)

URL_SCHEMES = ("http://", "https://")


def is_url(locator: str) -> bool:
    return locator.lower().startswith(URL_SCHEMES)


def fetch(locator: Union[str, os.PathLike], timeout: float = 30) -> bytes:
    """Return the complete contents of a .vox file.

    `locator` is either an http(s) URL or a filesystem path. Any failure is
    raised as a SourceError chained to the original exception.
    """
    if isinstance(locator, str) and is_url(locator):
        logger.debug("downloading %s", locator)
        try:
            response = requests.get(locator, timeout=timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise SourceError(locator, str(e)) from e
        return response.content

    logger.debug("reading %s", locator)
    try:
        with open(locator, "rb") as f:
            return f.read()
    except OSError as e:
        raise SourceError(os.fspath(locator), e.strerror or str(e)) from e
