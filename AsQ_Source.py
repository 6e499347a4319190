#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
AltSudoQ_Source

Retrieves the published daily 9 x 9 game from the UK sudoku site.

Created on Sun Oct 18 17:20:44 2026

@author: alexanderpfaff
"""

from __future__ import annotations
import asyncio
import datetime
import logging
import re
import warnings
from typing import Optional

import aiohttp
from aiohttp import ClientConnectorError, ClientError

from AsQ_Grid import Grid


logger = logging.getLogger(__name__)

SUDOKU_UK_URL: str = "http://www.sudoku.org.uk/DailySudoku.asp"

# games are retained for this many days
RETAINED_DAYS: int = 30

_CELL_LINE = re.compile(r"^<td .*</td>$")
_CELL_VALUE = re.compile(r"^<td .*(.)</td>$")



class SourceFormatError(ValueError):
    """The page did not contain exactly 81 game cells."""


class SourceError(RuntimeError):
    """The page could not be retrieved."""



def days_ago(n: int = 0, warn: bool = True, today: Optional[datetime.date] = None) -> str:
    """
    Formats the date n days before today as "dd/mm/yy" (the site's day parameter).
    Issues a UserWarning if n is negative or beyond the retained window.
    """
    if warn and (n > RETAINED_DAYS or n < 0):
        warnings.warn(f"games for longer than {RETAINED_DAYS} days ago are not retained.", UserWarning)
    if today is None:
        today = datetime.date.today()
    then = today - datetime.timedelta(days=int(n))
    return then.strftime("%d/%m/%y")


def game_url(day: Optional[int] = None) -> str:
    if day is None:
        return SUDOKU_UK_URL
    return f"{SUDOKU_UK_URL}?day={days_ago(day)}"


def parse_game_page(html: str) -> Grid:
    """
    Scrapes a game page: every line of the form "<td ...>X</td>" holds one
    cell, X being its last character before "</td>"; anything but a digit
    (e.g. "&nbsp;") is a blank.

    Raises
    ------
    SourceFormatError
        If the page does not contain exactly 81 cell lines.
    """
    lines = [line for line in html.splitlines() if _CELL_LINE.match(line)]
    if len(lines) != 81:
        raise SourceFormatError(f"No game found (expected 81 cells, found {len(lines)}). Check the date?")
    cells = []
    for line in lines:
        m = _CELL_VALUE.match(line)
        # "<td </td>" carries no value character: blank
        cells.append(m.group(1) if m else "")
    return Grid.from_matrix([cells[i:i + 9] for i in range(0, 81, 9)])


async def _download_page(url: str, timeout: float) -> str:
    client_timeout = aiohttp.ClientTimeout(total=timeout)
    try:
        async with aiohttp.ClientSession(timeout=client_timeout) as session:
            async with session.get(url) as response:
                if response.status != 200:
                    raise SourceError(f"{url} answered with status {response.status}")
                return await response.text()

    except (ClientConnectorError, ClientError, asyncio.TimeoutError) as e:
        logger.warning("Network error fetching %s: %s", url, str(e))
        raise SourceError(f"Unable to retrieve {url}: {e}") from e


async def fetch_uk_game_async(day: Optional[int] = None, timeout: float = 20) -> Grid:
    """
    Retrieves the game published `day` days ago (today's game if None).

    Raises
    ------
    SourceError
        On network problems or a non-200 answer.
    SourceFormatError
        If the page holds no (complete) game.
    """
    url = game_url(day)
    logger.info("Fetching game from %s", url)
    html = await _download_page(url, timeout)
    return parse_game_page(html)


def fetch_uk_game(day: Optional[int] = None, timeout: float = 20) -> Grid:
    """ synchronous wrapper of fetch_uk_game_async """
    return asyncio.run(fetch_uk_game_async(day=day, timeout=timeout))
