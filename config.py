from pathlib import Path
import json
import os

CONFIG_FILE_PATH = Path(os.environ.get('WORDFINDER_CONFIG', Path(__file__).parent / 'config.json'))

DEFAULTS = {
    'logLevel': 'INFO',
    'sampleGrid': [],
    'sampleWords': [],
}

with open(CONFIG_FILE_PATH, 'r', encoding='utf-8') as f:
    config = {**DEFAULTS, **json.load(f)}
