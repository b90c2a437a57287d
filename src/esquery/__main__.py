import yaml
from loguru import logger

from esquery.config.general import CONFIG
from esquery.config.logger import configure_logging
from esquery.config.write_configs import write_default_configs


def main() -> None:
    """Write the default config file next to the active config."""
    configure_logging()

    logger.debug(
        f"Active config: \n{yaml.dump(yaml.safe_load(CONFIG.model_dump_json()))}"
    )

    target = write_default_configs()
    logger.info(f"Wrote config defaults to {target}")


if __name__ == "__main__":
    main()
