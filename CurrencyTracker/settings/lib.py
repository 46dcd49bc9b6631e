"""Settings library for the bundled application configuration.

Provides:
    - Schema validation for the settings.json structure.
    - Loading of the read-only defaults shipped with the package.
    - In-memory metadata access with change notifications.

Nothing is ever written back to disk: metadata changed at runtime, such as the
theme picked from the main window toolbar, lasts for the current session only.
"""

import json
import logging
import pathlib
import re
from typing import Dict, Any, Optional, List

from ..core.currency import Currency
from ..core.ledger import Category
from ..status import status

app_name: str = 'CurrencyTracker'


def is_valid_hex_color(value: str) -> bool:
    """Check if a string is a valid hexadecimal color in #RRGGBB format.

    Args:
        value (str): Color string to validate.

    Returns:
        bool: True if value matches '#RRGGBB', False otherwise.
    """
    return bool(re.fullmatch(r'#[0-9A-Fa-f]{6}', value))


METADATA_KEYS: List[str] = [
    'name',
    'locale',
    'base_currency',
    'theme',
]

SETTINGS_SCHEMA: Dict[str, Any] = {
    'metadata': {
        'type': dict,
        'required': True,
        'required_keys': METADATA_KEYS,
        'item_schema': {
            'name': {'type': str, 'required': True},
            'locale': {'type': str, 'required': True},
            'base_currency': {'type': str, 'required': True, 'allowed_values': [f.value for f in Currency]},
            'theme': {'type': str, 'required': True},
        }
    },
    'categories': {
        'type': dict,
        'required': True,
        'allowed_keys': [f.value for f in Category],
        'item_schema': {
            'display_name': {'type': str, 'required': True},
            'color': {'type': str, 'required': True, 'format': 'hexcolor'},
            'description': {'type': str, 'required': False},
        }
    }
}


def _validate_metadata(metadata_dict: Dict[str, Any], specs: Dict[str, Any]) -> None:
    """Validate the 'metadata' section of the settings.

    Args:
        metadata_dict: Mapping of metadata keys to values.
        specs: Schema dict containing 'required_keys' and 'item_schema'.

    Raises:
        ValueError: If a required key is missing or a value is not allowed.
        TypeError: If a value has the wrong type.
    """
    logging.debug('Validating "metadata" section.')
    missing = [k for k in specs['required_keys'] if k not in metadata_dict]
    if missing:
        raise ValueError(f'Missing metadata keys: {missing}')

    for key, key_specs in specs['item_schema'].items():
        value = metadata_dict[key]
        if not isinstance(value, key_specs['type']):
            raise TypeError(f'Metadata key "{key}" must be {key_specs["type"]}, got {type(value)}.')
        allowed = key_specs.get('allowed_values')
        if allowed and value not in allowed:
            raise ValueError(f'Metadata key "{key}" must be one of {allowed}, got "{value}".')


def _validate_categories(categories_dict: Dict[str, Any], specs: Dict[str, Any]) -> None:
    """Validate the 'categories' section of the settings.

    Ensures categories_dict maps known category names to dicts of fields matching the item schema.

    Args:
        categories_dict: Mapping of category identifiers to their configuration dicts.
        specs: Schema dict containing 'allowed_keys' and 'item_schema'.

    Raises:
        TypeError: If category entries are not dicts or fields have the wrong type.
        ValueError: If a category is unknown, or a required field is missing or malformed.
    """
    logging.debug('Validating "categories" section.')
    for cat_name, cat_info in categories_dict.items():
        if cat_name not in specs['allowed_keys']:
            raise ValueError(f'Unknown category "{cat_name}", must be one of {specs["allowed_keys"]}.')
        if not isinstance(cat_info, dict):
            raise TypeError(f'Category "{cat_name}" must be a dict.')

        for field, field_specs in specs['item_schema'].items():
            if field not in cat_info:
                if field_specs['required']:
                    raise ValueError(f'Category "{cat_name}" missing "{field}".')
                continue
            if not isinstance(cat_info[field], field_specs['type']):
                raise TypeError(
                    f'Category "{cat_name}" field "{field}" must be {field_specs["type"]}, '
                    f'got {type(cat_info[field])}.'
                )
            if field_specs.get('format') == 'hexcolor' and not is_valid_hex_color(cat_info[field]):
                raise ValueError(
                    f'Category "{cat_name}" field "{field}" must be a valid '
                    f'hex color (#RRGGBB), got "{cat_info[field]}".'
                )


class ConfigPaths:
    """Locate the configuration files bundled with the package."""

    def __init__(self) -> None:
        self.template_dir: pathlib.Path = pathlib.Path(__file__).parent.parent / 'config'
        self.settings_path: pathlib.Path = self.template_dir / 'settings.json'
        self.stylesheet_path: pathlib.Path = self.template_dir / 'stylesheet.qss'

        self._verify()

    def _verify(self) -> None:
        """Verify the bundled configuration files exist.

        Raises:
            FileNotFoundError: If the config directory or stylesheet is missing.
        """
        logging.debug(f'Verifying bundled configuration in {self.template_dir}')
        if not self.template_dir.exists():
            raise FileNotFoundError(f'Missing config directory: {self.template_dir}')
        if not self.stylesheet_path.exists():
            raise FileNotFoundError(f'Missing stylesheet template: {self.stylesheet_path}')


class SettingsAPI(ConfigPaths):
    """Read-only access to settings.json with in-memory metadata overrides."""

    def __init__(self, settings_path: Optional[str] = None) -> None:
        """Initialize SettingsAPI and load the settings data.

        Args:
            settings_path: Optional path to a custom settings.json file.
        """
        super().__init__()

        if settings_path:
            self.settings_path = pathlib.Path(settings_path)

        self.data: Dict[str, Any] = {k: {} for k in SETTINGS_SCHEMA}

        self.load()

    def __getitem__(self, key: str) -> Any:
        """Retrieve a metadata value using dictionary-style access.

        Raises:
            KeyError: If key is not in METADATA_KEYS.
        """
        if key not in METADATA_KEYS:
            raise KeyError(f'Invalid metadata key: {key}, must be one of {METADATA_KEYS}')
        return self.data['metadata'].get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        """Assign a metadata value for the current session and notify listeners.

        Args:
            key: Metadata key to set.
            value: Value to assign. Converted to the schema type when possible.

        Raises:
            KeyError: If key is not in METADATA_KEYS.
            ValueError: If value is not allowed for the key.
        """
        if key not in METADATA_KEYS:
            raise KeyError(f'Invalid metadata key: {key}, must be one of {METADATA_KEYS}')

        key_specs = SETTINGS_SCHEMA['metadata']['item_schema'][key]
        _type = key_specs['type']
        if not isinstance(value, _type):
            logging.warning(f'Metadata key "{key}" is not of type {_type}, got {type(value)}.')
            value = _type(value)

        allowed = key_specs.get('allowed_values')
        if allowed and value not in allowed:
            raise ValueError(f'Metadata key "{key}" must be one of {allowed}, got "{value}".')

        if self.data['metadata'].get(key) == value:
            return

        self.data['metadata'][key] = value
        logging.debug(f'Metadata "{key}" set to "{value}"')

        from ..ui.actions import signals
        signals.metadataChanged.emit(key, value)

    def load(self) -> Dict[str, Any]:
        """Load settings.json from disk and validate it against the schema.

        Returns:
            The loaded settings dictionary.

        Raises:
            status.ConfigNotFoundException: If the file is missing.
            status.ConfigInvalidException: If JSON parsing or validation fails.
        """
        logging.debug(f'Loading settings from "{self.settings_path}"')
        if not self.settings_path.exists():
            raise status.ConfigNotFoundException(str(self.settings_path))

        try:
            with self.settings_path.open('r', encoding='utf-8') as f:
                data: Dict[str, Any] = json.load(f)
            self.validate(data)
        except (ValueError, TypeError) as ex:
            raise status.ConfigInvalidException(str(ex)) from ex

        self.data = data
        return self.data

    def validate(self, data: Optional[Dict[str, Any]] = None) -> None:
        """Validate settings data against SETTINGS_SCHEMA.

        Args:
            data (dict, optional): Settings data to validate. Defaults to the loaded data.

        Raises:
            ValueError: If a required section is missing or a value is not allowed.
            TypeError: If a section or value has the wrong type.
        """
        if data is None:
            data = self.data
        if not data:
            raise ValueError('Settings data is empty.')

        for field, specs in SETTINGS_SCHEMA.items():
            if specs.get('required') and field not in data:
                raise ValueError(f'Missing required field: {field}')
            if not isinstance(data[field], specs['type']):
                raise TypeError(f'Field "{field}" must be {specs["type"]}, got {type(data[field])}.')

            if field == 'metadata':
                _validate_metadata(data[field], specs)
            elif field == 'categories':
                _validate_categories(data[field], specs)

        logging.debug('Settings data is valid.')

    def category_display_name(self, category: str) -> str:
        """Return the configured display name of a category, or the category itself."""
        info = self.data['categories'].get(str(category), {})
        return info.get('display_name') or str(category)

    def category_color(self, category: str) -> Optional[str]:
        """Return the configured hex color of a category, if any."""
        return self.data['categories'].get(str(category), {}).get('color')


settings: SettingsAPI = SettingsAPI()
