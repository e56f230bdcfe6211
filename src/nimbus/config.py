"""Configuration management for template options."""

import logging
from pathlib import Path
from typing import Dict, Any, List, Optional
import hashlib

from ruamel.yaml import YAML
from pydantic import ValidationError

from nimbus.errors import TemplateNotFound
from nimbus.models.config import NimbusConfig
from nimbus.models.template import TemplateSpec
from nimbus.options.base import TemplateOptions
from nimbus.providers.registry import ProviderRegistry
from nimbus.utils.templates import merge_dicts


logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads the main configuration and named option templates."""

    def __init__(self, config_dir: Path):
        """Initialize configuration manager."""
        self.config_dir = Path(config_dir)
        self.yaml = YAML(typ="safe")
        self.config: Optional[NimbusConfig] = None
        self.errors: List[str] = []
        self._raw_templates: Dict[str, Dict[str, Any]] = {}
        self._config_hashes: Dict[str, str] = {}

    def load(self):
        """Load all configuration files."""
        logger.info(f"Loading configuration from {self.config_dir}")
        self.errors.clear()
        self._config_hashes.clear()
        self._load_main_config()
        self._load_templates()
        logger.info("Configuration loaded successfully")

    def _load_main_config(self):
        """Load main configuration file."""
        config_file = self.config_dir / "config.yaml"
        if not config_file.exists():
            raise FileNotFoundError(f"Main config not found: {config_file}")

        try:
            data = self._read_yaml(config_file) or {}
            self.config = NimbusConfig(**data)
            logger.debug(f"Loaded main config: {config_file}")
        except ValidationError as e:
            logger.error(f"Invalid main config: {e}")
            raise

    def _load_templates(self):
        """Load raw template definitions."""
        templates_dir = self.config_dir / self.config.templates_dir
        self._raw_templates.clear()
        if not templates_dir.exists():
            logger.warning(f"Templates directory not found: {templates_dir}")
            return

        for yaml_file in sorted(templates_dir.glob("*.yaml")):
            try:
                data = self._read_yaml(yaml_file) or {}
                for name, spec in data.items():
                    if name in self._raw_templates:
                        logger.warning(f"Template {name} redefined in {yaml_file}")
                    self._raw_templates[name] = dict(spec or {})
                logger.debug(f"Loaded templates from {yaml_file}")
            except Exception as e:
                logger.error(f"Error loading {yaml_file}: {e}")
                self.errors.append(f"{yaml_file.name}: {e}")

    def _read_yaml(self, file_path: Path) -> Dict[str, Any]:
        """Read and parse YAML file."""
        content = file_path.read_text()
        # Store hash for change detection
        self._config_hashes[str(file_path)] = hashlib.md5(content.encode()).hexdigest()
        return self.yaml.load(content)

    def has_changed(self) -> bool:
        """Check if configuration files have changed since the last load."""
        config_file = self.config_dir / "config.yaml"
        current = {str(config_file)} if config_file.exists() else set()
        if self.config is not None:
            templates_dir = self.config_dir / self.config.templates_dir
            current.update(str(path) for path in templates_dir.glob("*.yaml"))
        if current != set(self._config_hashes):
            return True
        for path in current:
            content = Path(path).read_text()
            if self._config_hashes[path] != hashlib.md5(content.encode()).hexdigest():
                return True
        return False

    def list_templates(self) -> List[str]:
        """List template names in load order."""
        return list(self._raw_templates.keys())

    def _resolve(self, name: str, chain: List[str]) -> Dict[str, Any]:
        if name in chain:
            cycle = " -> ".join(chain + [name])
            raise TemplateNotFound(f"Template inheritance cycle: {cycle}")
        raw = self._raw_templates.get(name)
        if raw is None:
            raise TemplateNotFound(f"Template not found: {name}")

        parent = raw.get("extends")
        if not parent:
            return dict(raw)
        base = self._resolve(parent, chain + [name])
        return merge_dicts(base, raw)

    def get_template(self, name: str) -> TemplateSpec:
        """Return the validated template ``name`` with inheritance applied."""
        data = self._resolve(name, [])
        data["name"] = name
        return TemplateSpec(**data)

    def build_options(self, name: str, registry: Optional[ProviderRegistry] = None) -> TemplateOptions:
        """Build the options object described by template ``name``."""
        spec = self.get_template(name)
        if registry is None:
            registry = ProviderRegistry()
            registry.initialize(self.config)
        provider = spec.provider or self.config.default_provider
        options = registry.template_options(provider)
        return spec.apply_to(options)
