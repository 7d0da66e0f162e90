"""Configuration management for the eight queens reporting tools.

This module provides a thin, explicit wrapper around a JSON configuration file
to centralize output locations and rendering markers.

File format (high-level)
------------------------
- output_settings: ``out_dir``, optional ``run_tag`` and
  ``date_in_filenames`` flag used to name CSV and chart files.
- render_settings: ``queen`` and ``empty`` markers used when printing boards.

All methods return Python native types; the class does not validate semantics
beyond presence of keys to keep responsibilities minimal.
"""
import json
from pathlib import Path


class ConfigManager:
    """Load, query, and persist configuration.

    Parameters
    ----------
    config_path : str | os.PathLike, default "config.json"
        Path to the configuration file.
    """

    def __init__(self, config_path="config.json"):
        self.config_path = Path(config_path)
        self.config = self.load_config()

    def load_config(self):
        """Load and parse the JSON configuration file.

        Returns
        -------
        dict
            Root configuration object.
        """
        if not self.config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self.config_path}\n"
                f"Create it or run without --config to use the defaults"
            )

        with open(self.config_path, 'r') as f:
            return json.load(f)

    def save_config(self):
        """Persist the current in-memory configuration to disk."""
        with open(self.config_path, 'w') as f:
            json.dump(self.config, f, indent=2)

    def get_output_settings(self):
        """Return output settings (directory, run tag, datestamp flag)."""
        return self.config.get("output_settings", {})

    def get_render_settings(self):
        """Return board rendering markers."""
        return self.config.get("render_settings", {})

    def update_setting(self, section, key, value):
        """Update a specific setting and persist the change immediately."""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value
        self.save_config()
