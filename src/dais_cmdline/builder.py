import logging
from typing import Any, Mapping
from .config import CommandLineConfig, get_default_config
from .platforms import BasePlatform, detect_platform
from .template import interpolate
from .types import validate_parameter_names

logger = logging.getLogger(__name__)

class CommandBuilder:
    def __init__(self,
                 config: CommandLineConfig | None = None,
                 platform: BasePlatform | None = None,
                 ):
        self._config = config
        self._platform = platform

    @property
    def config(self) -> CommandLineConfig:
        return self._config or get_default_config()

    @property
    def platform(self) -> BasePlatform:
        return self._platform or detect_platform()

    def build(self,
              executable: str,
              template: str = "",
              parameters: Mapping[str, Any] | None = None,
              swallow_stderr: bool = False,
              ) -> str:
        """
        Render `executable` followed by `template` with every `:name` / `:{name}`
        reference replaced by the quoted parameter value.
        """
        parameters = parameters or {}
        validate_parameter_names(parameters.keys())

        platform = self.platform
        command = self.config.resolve_executable(executable)
        arguments = interpolate(template, parameters, platform.quote)
        command = f"{command} {arguments}"
        if swallow_stderr:
            command += platform.stderr_redirect()

        logger.debug("Built command for %s: %s", platform.name, command)
        return command

def build(executable: str,
          template: str = "",
          parameters: Mapping[str, Any] | None = None,
          *,
          swallow_stderr: bool = False,
          config: CommandLineConfig | None = None,
          platform: BasePlatform | None = None,
          ) -> str:
    return CommandBuilder(config, platform).build(executable, template, parameters, swallow_stderr)
