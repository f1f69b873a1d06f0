# Common utilities
from .config_loader import default_catalog_settings, load_catalog_settings, load_config, resolve_data_dir
from .csv_utils import parse_line, parse_records, read_records
from .log_config import setup_logging
from .text_utils import capitalize_words, clean_html_content, clean_optional, slugify_title
