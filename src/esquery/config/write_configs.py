from pathlib import Path

from esquery.config.general import GeneralConfig


def write_default_configs(directory: Path | None = None) -> Path:
    """Write out config defaults, returning the written file."""
    target = (directory or Path("config")) / "esquery.default.yaml"
    GeneralConfig.write_default(target.resolve())
    return target
