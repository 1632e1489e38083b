"""Template manager for bundled design presets.

Templates are design files shipped as package data. They can be listed,
read as text, copied to disk, or loaded straight into a ConfigurationModel.
"""

from importlib import resources
from pathlib import Path

from planner.application.config.adapter import config_to_model
from planner.application.config.loader import load_config_from_json
from planner.domain.entities import ConfigurationModel


class TemplateNotFoundError(Exception):
    """Raised when a requested template does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template not found: {name}")


# Template metadata: name -> description
TEMPLATE_METADATA: dict[str, str] = {
    "garage-basic-single": "12x20 single-bay garage with one overhead door",
    "garage-standard-double": "20x20 two-bay garage, insulated and wired",
    "garage-deluxe-double": "24x24 two-bay garage with attic trusses",
    "garage-triple-bay": "30x24 three-bay garage with hip roof",
    "kitchen-blank": "Empty 12x14 kitchen",
    "kitchen-l-shape": "12x14 L-shaped kitchen with appliances",
}


class TemplateManager:
    """Access to the bundled design templates.

    Example:
        manager = TemplateManager()
        for name, description in manager.list_templates():
            print(f"{name}: {description}")

        model = manager.load_template("garage-standard-double")
    """

    def __init__(self) -> None:
        self._data_package = "planner.application.templates.data"

    def list_templates(self, planner_type: str | None = None) -> list[tuple[str, str]]:
        """List (name, description) pairs, optionally only one planner's."""
        return [
            (name, desc)
            for name, desc in TEMPLATE_METADATA.items()
            if planner_type is None or name.startswith(f"{planner_type}-")
        ]

    def get_template(self, name: str) -> str:
        """Get the JSON content of a template.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        if name not in TEMPLATE_METADATA:
            raise TemplateNotFoundError(name)
        try:
            template_file = resources.files(self._data_package).joinpath(f"{name}.json")
            return template_file.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise TemplateNotFoundError(name) from e

    def load_template(self, name: str) -> ConfigurationModel:
        """Load a template as a fresh ConfigurationModel."""
        return config_to_model(load_config_from_json(self.get_template(name)))

    def init_template(self, name: str, output_path: Path) -> None:
        """Copy a template to ``output_path``, overwriting any existing file.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        content = self.get_template(name)
        output_path.write_text(content, encoding="utf-8")

    def template_exists(self, name: str) -> bool:
        return name in TEMPLATE_METADATA
