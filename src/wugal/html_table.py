'''
Turns WhatsUp Gold JSON (API responses or files saved from them) into a sortable, searchable HTML table.
'''
import html
import json
import logging
import os
from datetime import datetime
from string import Template
import wugal.exceptions

TEMPLATE_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'templates', 'bootstrap_table.html')
DEFAULT_TITLE = 'WhatsUp Gold Report'

logger = logging.getLogger(__name__)


def to_records(document) -> list:
    '''
    Normalises a JSON document to a list of row dicts.

    An API envelope is unwrapped to its data member, and a data object holding exactly one list (for example
    {"devices": [...]}) is unwrapped to that list. A single object becomes a one row list and scalars become
    {"value": scalar} rows.
    '''
    if document is None:
        return []
    if isinstance(document, dict) and 'data' in document:
        document = document['data']
        if isinstance(document, dict):
            lists = [value for value in document.values() if isinstance(value, list)]
            if len(lists) == 1:
                document = lists[0]
    if isinstance(document, dict):
        document = [document]
    if not isinstance(document, list):
        document = [document]
    return [record if isinstance(record, dict) else {"value": record} for record in document]


def load_json(path: str) -> list:
    '''
    Reads a JSON file and returns its records. Files written by PowerShell's Out-File start with a BOM, which is
    accepted.
    '''
    with open(path, 'r', encoding='utf-8-sig') as f:
        try:
            document = json.load(f)
        except ValueError as e:
            raise wugal.exceptions.JSONError(f'{path} does not contain valid JSON.') from e
    return to_records(document)


def infer_columns(records: list) -> list:
    '''
    Column definitions for every field found in records, in the order fields are first seen.
    '''
    fields = []
    seen = set()
    for record in records:
        for field in record:
            if field not in seen:
                seen.add(field)
                fields.append(field)
    return [{"field": field, "title": field, "sortable": True, "searchable": True} for field in fields]


def _cell(value):
    #Nested objects would render as [object Object].
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(',', ':'))
    return value


def build_table(records) -> dict:
    '''
    Returns {"columns": [...], "rows": [...]} where every row has every column, in column order. Missing fields
    are filled with "".
    '''
    records = to_records(records)
    columns = infer_columns(records)
    rows = []
    for record in records:
        rows.append({column['field']: _cell(record.get(column['field'], "")) for column in columns})
    return {"columns": columns, "rows": rows}


def _script_json(value) -> str:
    #A literal </script> inside the data would end the script block.
    return json.dumps(value, ensure_ascii=False).replace('</', '<\\/')


def load_template(path: str = TEMPLATE_PATH) -> str:
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def render_html(records, title: str = DEFAULT_TITLE, template: str = None, generated: str = None) -> str:
    '''
    Renders records into an HTML page.

    template is a string.Template with $title, $generated, $columns and $rows placeholders; the bundled
    Bootstrap Table page is used when it is not given. generated defaults to the current local time.
    '''
    table = build_table(records)
    if generated is None:
        generated = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
    page = Template(template if template is not None else load_template())
    try:
        return page.substitute(title=html.escape(title), generated=html.escape(generated),
                               columns=_script_json(table['columns']), rows=_script_json(table['rows']))
    except (KeyError, ValueError) as e:
        raise wugal.exceptions.WUGALException(f'Invalid HTML template: {e}') from e


def export_html(records, path: str, title: str = DEFAULT_TITLE, template: str = None, generated: str = None) -> str:
    '''
    Renders records and writes the page to path. Returns path.
    '''
    page = render_html(records, title=title, template=template, generated=generated)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(page)
    logger.debug(msg=f'EXPORTED,PATH={path},TITLE={title}')
    return path
