import copy
from typing import Any, Iterable, Sequence

import click

from .deprecation import deprecated

TABLE_CONFIG_DEFAULTS: dict[str, Any] = {
    'single_line': True,
    'border': {
        'body_left': '',
        'body_right': '',
        'body_join': '',
    },
    'column_default': {
        'padding_left': 0,
        'padding_right': 1,
    },
}


def merge_deep(target: dict, *sources: dict) -> dict:
    for source in sources:
        for key, value in source.items():
            if isinstance(value, dict) and isinstance(target.get(key), dict):
                merge_deep(target[key], value)
            else:
                target[key] = copy.deepcopy(value)
    return target


def _cell_text(cell: Any, single_line: bool) -> str:
    text = '' if cell is None else str(cell)
    if single_line:
        text = ' '.join(text.splitlines())
    return text


@deprecated()
def get_table_contents(
    table_data: Sequence[Sequence[Any]] | None = None,
    table_config: dict | None = None,
) -> str:
    """Render rows as a borderless, left aligned table.

    Column widths are measured on the unstyled text so bold headers line up
    with plain rows.
    """
    config = merge_deep(copy.deepcopy(TABLE_CONFIG_DEFAULTS), table_config or {})
    rows = [
        [_cell_text(cell, config['single_line']) for cell in row]
        for row in table_data or []
    ]
    if not rows:
        return ''

    column_count = max(len(row) for row in rows)
    widths = [0] * column_count
    for row in rows:
        for index, cell in enumerate(row):
            widths[index] = max(widths[index], len(click.unstyle(cell)))

    border = config['border']
    padding_left = ' ' * config['column_default']['padding_left']
    padding_right = ' ' * config['column_default']['padding_right']
    lines = []
    for row in rows:
        cells = []
        for index in range(column_count):
            cell = row[index] if index < len(row) else ''
            fill = ' ' * (widths[index] - len(click.unstyle(cell)))
            cells.append(f'{padding_left}{cell}{fill}{padding_right}')
        lines.append(f'{border["body_left"]}{border["body_join"].join(cells)}{border["body_right"]}')
    return '\n'.join(lines) + '\n'


@deprecated()
def get_table_header(header_items: Iterable[str]) -> list[str]:
    return [click.style(item, bold=True) for item in header_items]
