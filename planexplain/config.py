from dataclasses import dataclass
from typing import Optional

from loguru import logger
from planexplain.core.detail_level import DetailLevel
from planexplain.core.explain import OutputSink, PlanWriter
from planexplain.utils import get_env_variable, parse_bool

ENV_DETAIL_LEVEL = "PLANEXPLAIN_DETAIL_LEVEL"
ENV_ID_PREFIX = "PLANEXPLAIN_ID_PREFIX"
ENV_EXPAND = "PLANEXPLAIN_EXPAND"
ENV_CHECK_INPUTS = "PLANEXPLAIN_CHECK_INPUTS"


@dataclass
class ExplainConfig:
    detail_level: DetailLevel = DetailLevel.EXPPLAN_ATTRIBUTES
    with_id_prefix: bool = True
    expand: bool = False
    # None means the check follows __debug__
    check_inputs: Optional[bool] = None

    @classmethod
    def from_env(cls) -> "ExplainConfig":
        """
        Builds a configuration from PLANEXPLAIN_* environment variables.
        Variables that are not set keep their default value.

        Returns:
            ExplainConfig: The configuration.
        """
        check_inputs = get_env_variable(ENV_CHECK_INPUTS, "")
        config = cls(
            detail_level=DetailLevel.parse(get_env_variable(ENV_DETAIL_LEVEL, DetailLevel.EXPPLAN_ATTRIBUTES.name)),
            with_id_prefix=parse_bool(get_env_variable(ENV_ID_PREFIX, "true")),
            expand=parse_bool(get_env_variable(ENV_EXPAND, "false")),
            check_inputs=parse_bool(check_inputs) if check_inputs else None,
        )
        logger.debug(f"Loaded explain configuration from environment: {config}")
        return config

    def create_writer(self, sink: OutputSink) -> PlanWriter:
        return PlanWriter(
            sink,
            detail_level=self.detail_level,
            with_id_prefix=self.with_id_prefix,
            expand=self.expand,
            check_inputs=self.check_inputs,
        )
