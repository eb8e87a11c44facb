"""
Reading point records and writing clustering reports.

Input is a whitespace-delimited stream of ``<index> <x> <y>`` records. The
reports are a console listing and a fixed-width table file.
"""
import logging
import math

from .errors import DataError, OutputError

logger = logging.getLogger(__name__)

TABLE_RULE = '-' * 46
TABLE_HEADER = '|  Index   |  X     |   Y    | Cluster ID |'


def _parse_record(tokens):
    index = int(tokens[0])
    x = float(tokens[1])
    y = float(tokens[2])
    if not (math.isfinite(x) and math.isfinite(y)):
        raise ValueError('non-finite coordinate')
    return index, x, y


def parse_records(text, strict=False):
    """Parse ``(index, x, y)`` triples from ``text`` in order.

    Reading stops at the first record that cannot be parsed. The rest of the
    stream is dropped with a warning, or raises DataError when ``strict``.
    """
    tokens = text.split()
    records = []
    for start in range(0, len(tokens), 3):
        chunk = tokens[start:start + 3]
        try:
            if len(chunk) < 3:
                raise ValueError('incomplete record')
            records.append(_parse_record(chunk))
        except ValueError as e:
            dropped = len(tokens) - start
            if strict:
                raise DataError('malformed record %d (%s): %r'
                                % (len(records) + 1, e, ' '.join(chunk))) from e
            logger.warning('Stopped reading at record %d (%s), %d trailing tokens ignored',
                           len(records) + 1, e, dropped)
            break
    return records


def read_records(path, strict=False):
    try:
        with open(path, encoding='utf-8') as f:
            text = f.read()
    except FileNotFoundError as e:
        raise DataError('File not found: %s' % path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise DataError('Unable to read %s: %s' % (path, e)) from e

    records = parse_records(text, strict=strict)
    logger.info('Read %d records from %s', len(records), path)
    return records


def format_point(point):
    return 'Index: %d\t| X: %g\t| Y: %g\t| Cluster ID: %s' % (
        point.id, point.x, point.y, point.group_id)


def format_console(points, groups=()):
    lines = ['K-Means Results:', '-' * 63]
    lines.extend(format_point(p) for p in points)
    for group in groups:
        lines.append(group.describe())
    lines.append('')
    lines.append('K-Means clustering result calculated successfully!')
    return '\n'.join(lines)


def format_table(points):
    lines = [TABLE_RULE, TABLE_HEADER, TABLE_RULE]
    for p in points:
        lines.append('| %8d | %6.2f | %6.2f | %10s |' % (p.id, p.x, p.y, p.group_id))
    lines.append(TABLE_RULE)
    return '\n'.join(lines) + '\n'


def save_results(path, points):
    """Write the fixed-width result table to ``path``.

    Raises OutputError if the file cannot be created or written.
    """
    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(format_table(points))
    except OSError as e:
        raise OutputError('Unable to open file: %s (%s)' % (path, e)) from e
    logger.info('Saved %d rows to %s', len(points), path)
