"""
Loading the run configuration (swift.toml)
"""
import logging
import tomllib
from pathlib import Path

from pydantic import ValidationError

from ..core.errors import ConfigurationMalformed, ConfigurationMissing, FileSystemError
from ..schemas import SwiftConfig
from .prompt import Prompter, ask_yes_no

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = '''[device]
name = "SWIFT"

[archive_org]
access_key = "YOUR_ACCESS_KEY_HERE"
secret_key = "YOUR_SECRET_KEY_HERE"
creator = "Your name here"
subject_tags = ["soundscapes", "Cornell Swift Recorder"]
collection_id = "media"
license_url = "https://creativecommons.org/licenses/by/4.0/"
base_description = """
Recordings from a Cornell Swift Bioacoustics Recorder."""
test_item = true
'''


def parse_swift_config(text: str, source: str = "<string>") -> SwiftConfig:
    try:
        return SwiftConfig.model_validate(tomllib.loads(text))
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationMalformed(f"{source} is not valid TOML: {e}") from e
    except ValidationError as e:
        raise ConfigurationMalformed(f"{source} is missing or has invalid settings: {e}") from e


def write_placeholder_config(path: Path) -> None:
    try:
        Path(path).write_text(DEFAULT_CONFIG, encoding="utf-8")
    except OSError as e:
        raise FileSystemError(f"Cannot write {path}: {e}") from e
    logger.info(f"✅ Wrote placeholder config to {path}, fill in your archive keys")


def load_swift_config(path: Path, prompter: Prompter) -> SwiftConfig:
    """
    Read swift.toml, offering to create a placeholder when it is missing.

    Raises:
        ConfigurationMissing: the file is absent and the user declined
        ConfigurationMalformed: the file cannot be parsed or validated
    """
    path = Path(path)
    if not path.is_file():
        question = f"No `{path.name}` file was found, do you want one created with placeholder values? (y/n)"
        if not ask_yes_no(prompter, question):
            raise ConfigurationMissing(
                f"You will need a `{path.name}` file in the root directory of your recordings to use this tool."
            )
        write_placeholder_config(path)

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ConfigurationMalformed(f"{path} is not valid UTF-8 TOML: {e}") from e
    except OSError as e:
        raise FileSystemError(f"Cannot read {path}: {e}") from e

    return parse_swift_config(text, source=str(path))
