"""Utility modules: config, logging, validation, converters."""
import os
import logging
import sys
from typing import Dict, Any, List, Optional

from dotenv import load_dotenv

from .models import EmojiCategory, PickerConfiguration, SkinTone, ALL_CATEGORIES

# Load .env file for local development
load_dotenv()

logger = logging.getLogger(__name__)


# ============================================================================
# CONFIGURATION
# ============================================================================

class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""
    pass


TRUE_STRINGS = ('true', '1', 'yes', 'on')
BOOLEAN_STRINGS = TRUE_STRINGS + ('false', '0', 'no', 'off')


def validate_config() -> Dict[str, Any]:
    """
    Validate picker configuration values from environment variables.

    Returns:
        Dictionary of validated configuration values

    Raises:
        ConfigError: If any value cannot be interpreted
    """
    optional_vars = {
        'catalog_path': ('EMOJI_CATALOG_PATH', ''),
        'preferences_path': ('EMOJI_PREFERENCES_PATH', ''),
        'default_skin_tone': ('EMOJI_DEFAULT_SKIN_TONE', ''),
        'supports_skin_tones': ('EMOJI_SUPPORTS_SKIN_TONES', 'true'),
        'persist_skin_tones': ('EMOJI_PERSIST_SKIN_TONES', 'true'),
        'categories': ('EMOJI_CATEGORIES', ''),
        'log_level': ('EMOJI_LOG_LEVEL', 'INFO'),
    }

    raw = {}
    for key, (env_var, default) in optional_vars.items():
        raw[key] = os.getenv(env_var, default).strip()

    invalid = []

    default_skin_tone = None
    if raw['default_skin_tone']:
        try:
            default_skin_tone = SkinTone.from_identifier(raw['default_skin_tone'])
        except ValueError:
            invalid.append(f"EMOJI_DEFAULT_SKIN_TONE={raw['default_skin_tone']}")

    categories = list(ALL_CATEGORIES)
    if raw['categories']:
        categories = []
        for name in raw['categories'].split(','):
            if not name.strip():
                continue
            try:
                categories.append(EmojiCategory.from_name(name))
            except ValueError:
                invalid.append(f"EMOJI_CATEGORIES={name.strip()}")

    for key, env_var in (('supports_skin_tones', 'EMOJI_SUPPORTS_SKIN_TONES'),
                         ('persist_skin_tones', 'EMOJI_PERSIST_SKIN_TONES')):
        raw[key] = raw[key] or 'true'
        if raw[key].lower() not in BOOLEAN_STRINGS:
            invalid.append(f"{env_var}={raw[key]}")

    if invalid:
        raise ConfigError(f"Invalid configuration values: {invalid}")

    config = {
        'catalog_path': raw['catalog_path'] or None,
        'preferences_path': raw['preferences_path'] or None,
        'default_skin_tone': default_skin_tone,
        'supports_skin_tones': safe_cast(raw['supports_skin_tones'], bool, True),
        'persist_skin_tones': safe_cast(raw['persist_skin_tones'], bool, True),
        'categories': categories,
        'log_level': raw['log_level'].upper() or 'INFO',
    }

    logger.info("Configuration validated successfully")
    logger.info(f"Picker config: {len(categories)} categories, default tone "
                f"{default_skin_tone.identifier if default_skin_tone else 'none'}")
    return config


def configuration_from_config(config: Dict[str, Any]) -> PickerConfiguration:
    """Build a PickerConfiguration from a validate_config() dictionary."""
    return PickerConfiguration(
        categories=tuple(config.get('categories') or ALL_CATEGORIES),
        supports_skin_tones=config.get('supports_skin_tones', True),
        persist_skin_tones=config.get('persist_skin_tones', True),
        default_skin_tone=config.get('default_skin_tone'),
    )


# ============================================================================
# LOGGING
# ============================================================================

def setup_logging(level: str = "INFO", structured: bool = True) -> None:
    """Configure logging for the application."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    if structured:
        formatter = logging.Formatter(
            '{"timestamp": "%(asctime)s", "name": "%(name)s", "level": "%(levelname)s", "message": "%(message)s"}',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger('apache_beam').setLevel(logging.WARNING)
    logging.getLogger('urllib3').setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name."""
    return logging.getLogger(name)


# ============================================================================
# VALIDATION
# ============================================================================

class ValidationError(Exception):
    """Raised when data validation fails."""
    pass


def validate_required_fields(data: Dict[str, Any], required_fields: List[str]) -> None:
    """Validate that all required fields are present in data."""
    missing_fields = [field for field in required_fields if field not in data]
    if missing_fields:
        raise ValidationError(f"Missing required fields: {missing_fields}")


def validate_field_types(data: Dict[str, Any], field_types: Dict[str, type]) -> None:
    """Validate that fields have the expected types."""
    for field, expected_type in field_types.items():
        if field in data and not isinstance(data[field], expected_type):
            actual_type = type(data[field]).__name__
            expected_type_name = expected_type.__name__
            raise ValidationError(
                f"Field '{field}' has type {actual_type}, expected {expected_type_name}"
            )


def safe_cast(value: Any, target_type: type, default: Any = None) -> Any:
    """Safely cast value to target type with fallback."""
    if value is None:
        return default

    try:
        if target_type == bool:
            if isinstance(value, str):
                return value.lower() in TRUE_STRINGS
            return bool(value)
        elif target_type == int:
            return int(float(value))  # Handle "123.0" strings
        elif target_type == str:
            return str(value)
        else:
            return target_type(value)
    except (ValueError, TypeError):
        logger.warning(f"Failed to cast {value} to {target_type.__name__}, using default {default}")
        return default


def parse_skin_tone(value: Optional[str]) -> Optional[SkinTone]:
    """Parse an optional tone name from user input; empty, 'none' and 'default' mean no tone."""
    if value is None or value.strip().lower() in ('', 'none', 'default'):
        return None
    return SkinTone.from_identifier(value)
