"""Parsers for the three input artifacts.

Each parser consumes an iterable of text lines, so the caller owns the
file handle. ``source`` is only used to label errors and log records.

- borders:      ``<name> = <neighbor spec> ; <neighbor spec> ; ...``
- distances:    CSV ``numa,code_a,numb,code_b,km,...`` with a header row
- state names:  TSV ``num<TAB>code<TAB>name<TAB>...``
"""

from __future__ import annotations

import csv
import logging
import re
from typing import Dict, FrozenSet, Iterable, List, Tuple

from ..domain.errors import MalformedLineError

logger = logging.getLogger(__name__)

Borders = Dict[str, Tuple[str, ...]]
Distances = Dict[FrozenSet[str], int]

# Everything from the first digit onward is a length qualifier ("2,670 km").
_QUALIFIER = re.compile(r"\d")


def neighbor_name(spec: str) -> str:
    """Strip the trailing length qualifier from a neighbor spec.

    >>> neighbor_name(" Pakistan 2,670 km")
    'Pakistan'
    """
    return _QUALIFIER.split(spec, maxsplit=1)[0].strip()


def parse_borders(lines: Iterable[str], source: str = "<borders>") -> Borders:
    """Parse the borders artifact into ``name -> neighbor names``.

    Raises:
        MalformedLineError: If a line has an empty country name.
    """
    borders: Dict[str, List[str]] = {}

    for line_number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue

        country, sep, rest = line.partition("=")
        country = country.strip()
        if not country:
            raise MalformedLineError(
                "Missing country name in borders line",
                file_path=source,
                line=line,
                line_number=line_number,
            )

        neighbors: List[str] = []
        if sep:
            for spec in rest.split(";"):
                name = neighbor_name(spec)
                if name:
                    neighbors.append(name)

        if country in borders:
            logger.warning(
                "Country %r listed twice in %s, merging neighbors",
                country,
                source,
                extra={"country": country, "line_number": line_number},
            )
            borders[country].extend(n for n in neighbors if n not in borders[country])
        else:
            borders[country] = neighbors

    return {country: tuple(neighbors) for country, neighbors in borders.items()}


def parse_distances(lines: Iterable[str], source: str = "<distances>") -> Distances:
    """Parse the capital-distance artifact into ``{code_a, code_b} -> km``.

    The first row is a header and is discarded.

    Raises:
        MalformedLineError: If a row has fewer than five fields or a
            distance that is not a non-negative integer.
    """
    distances: Distances = {}
    reader = csv.reader(lines)
    header_seen = False

    for row in reader:
        if not any(field.strip() for field in row):
            continue
        if not header_seen:
            header_seen = True
            continue

        line = ",".join(row)
        if len(row) < 5:
            raise MalformedLineError(
                "Invalid format in distance file",
                file_path=source,
                line=line,
                line_number=reader.line_num,
            )

        code_a = row[1].strip()
        code_b = row[3].strip()
        try:
            km = int(row[4].strip())
        except ValueError as e:
            raise MalformedLineError(
                "Error parsing distance",
                cause=e,
                file_path=source,
                line=line,
                line_number=reader.line_num,
            )
        if km < 0:
            raise MalformedLineError(
                "Negative distance",
                file_path=source,
                line=line,
                line_number=reader.line_num,
            )

        if not code_a or not code_b:
            raise MalformedLineError(
                "Missing country code in distance file",
                file_path=source,
                line=line,
                line_number=reader.line_num,
            )

        if code_a == code_b:
            logger.debug("Ignoring self distance for %s", code_a)
            continue

        key = frozenset((code_a, code_b))
        known = distances.get(key)
        if known is None:
            distances[key] = km
        elif known != km:
            logger.warning(
                "Conflicting distance for %s-%s: keeping %d km, ignoring %d km",
                code_a,
                code_b,
                known,
                km,
                extra={"line_number": reader.line_num},
            )

    return distances


def _is_header(fields: List[str]) -> bool:
    try:
        int(fields[0].strip())
    except ValueError:
        return True
    return False


def parse_state_names(
    lines: Iterable[str], source: str = "<state names>"
) -> Tuple[Dict[str, str], Dict[str, str]]:
    """Parse the code/name artifact into ``(by_code, by_name)``.

    A leading row whose first field is not a number is taken as a
    header. The file lists a code once per period of existence, oldest
    first, so a repeated code takes the name from its latest row while
    every earlier name keeps resolving to it. A name already bound to a
    different code stays with the first one.

    Raises:
        MalformedLineError: If a line has fewer than three fields or an
            empty code or name.
    """
    by_code: Dict[str, str] = {}
    by_name: Dict[str, str] = {}
    first_row = True

    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue

        fields = line.split("\t")
        if len(fields) < 3:
            raise MalformedLineError(
                "Invalid format in state name file",
                file_path=source,
                line=line,
                line_number=line_number,
            )

        if first_row:
            first_row = False
            if _is_header(fields):
                continue

        code = fields[1].strip()
        name = fields[2].strip()
        if not code or not name:
            raise MalformedLineError(
                "Missing code or name in state name file",
                file_path=source,
                line=line,
                line_number=line_number,
            )

        previous = by_code.get(code)
        if previous is not None and previous != name:
            logger.info(
                "Code %s renamed from %r to %r",
                code,
                previous,
                name,
                extra={"line_number": line_number},
            )
        by_code[code] = name

        bound = by_name.get(name)
        if bound is None:
            by_name[name] = code
        elif bound != code:
            logger.warning(
                "Name %r already bound to %s, not rebinding it to %s",
                name,
                bound,
                code,
                extra={"line_number": line_number},
            )

    return by_code, by_name
