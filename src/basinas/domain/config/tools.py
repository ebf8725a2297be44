"""External tools configuration model."""

from pydantic import BaseModel, Field


class ToolsConfig(BaseModel):
    """Configuration for the external generators and installers.

    Attributes:
        npx: Executable used to run package binaries
        npm: Executable used to install packages
        next_app_package: Framework scaffolder package spec
        shadcn_package: UI component installer package spec
        base_color: Base color passed to the component installer
        install_docs: Whether to set up the documentation section
    """

    npx: str = Field("npx", min_length=1)
    npm: str = Field("npm", min_length=1)
    next_app_package: str = "create-next-app@latest"
    shadcn_package: str = "shadcn@latest"
    base_color: str = "neutral"
    install_docs: bool = True
