"""Build information handed to components that identify themselves.

There is no module-level version string to patch at startup. Whoever
starts the process builds a :class:`BuildInfo` and passes it to the
components that need a version or user agent.
"""

from pydantic import BaseModel, ConfigDict

__all__ = ["BuildInfo"]


class BuildInfo(BaseModel):
    """Version and authorship of the running relic build.

    Example:
        >>> BuildInfo(version="7.6.2").user_agent
        'relic/7.6.2'
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    version: str = "unknown"
    author: str = "SAS Institute Inc."

    @property
    def user_agent(self) -> str:
        return f"relic/{self.version}"
