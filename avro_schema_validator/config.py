# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration management for the Avro schema validator."""

import os
import logging
from dataclasses import dataclass

from .utils.logging_utils import configure_split_stream_logging, parse_level


ROOT_IDENTIFIER = "."


@dataclass
class ValidatorConfig:
    """Configuration class for schema validation runs."""
    root_identifier: str = ROOT_IDENTIFIER
    fail_on_extra_fields: bool = False
    log_level: str = "INFO"
    print_level: str = "ERROR"

    @classmethod
    def from_env(cls) -> 'ValidatorConfig':
        """Create configuration from environment variables."""
        return cls(
            root_identifier=os.getenv('AVRO_SCHEMA_VALIDATOR_ROOT_IDENTIFIER', ROOT_IDENTIFIER),
            fail_on_extra_fields=os.getenv('AVRO_SCHEMA_VALIDATOR_FAIL_ON_EXTRA_FIELDS', 'false').lower() == 'true',
            log_level=os.getenv('AVRO_SCHEMA_VALIDATOR_LOG_LEVEL', 'INFO'),
            print_level=os.getenv('AVRO_SCHEMA_VALIDATOR_PRINT_LEVEL', 'ERROR'),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = parse_level(self.log_level, logging.INFO)
        stderr_level = parse_level(self.print_level, logging.ERROR)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        configure_split_stream_logging(level=level, stderr_level=stderr_level, formatter=formatter)

        return logging.getLogger('avro_schema_validator')


# Global configuration instance
validator_config = ValidatorConfig.from_env()
