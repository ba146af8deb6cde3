# transaction_query/outputs/json_output.py
import json
from dataclasses import asdict, is_dataclass
from datetime import date

import click

from transaction_query.outputs.base import BaseOutput


def _to_jsonable(value):
    if is_dataclass(value):
        return {k: _to_jsonable(v) for k, v in asdict(value).items()}
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(v) for v in value]
    return value


class JSONOutput(BaseOutput):
    """Writes the whole report as a single JSON object keyed by query label."""

    def __init__(self, config):
        self.config = config
        self.indent = config.get('json_indent', 2)

    def write(self, report):
        payload = {label: _to_jsonable(result) for label, result in report}
        click.echo(json.dumps(payload, indent=self.indent))
