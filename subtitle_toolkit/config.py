"""
Modulo per la gestione della configurazione del toolkit sottotitoli
"""
import copy
import os
from typing import Dict, Any, Optional

import yaml

from .services.errors import ConfigError


class Config:
    """Classe per gestire la configurazione dell'applicazione"""

    DEFAULT_CONFIG = {
        'join': {
            'folder': './',
            'files': '*.srt',
            'sort': 'inferred',
            'buffer_ms': 100,
            'output': 'merged.srt',
            'log_level': 'info',
        },
        'transcript': {
            'paragraph_gap': 1,
        },
    }

    # Sezioni unite chiave per chiave invece di essere sostituite
    NESTED_SECTIONS = ('join', 'transcript')

    def __init__(self, config_file: Optional[str] = None):
        """
        Inizializza la configurazione

        Args:
            config_file: Path al file di configurazione YAML (opzionale)
        """
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file and os.path.exists(config_file):
            self.load_from_file(config_file)

    def load_from_file(self, config_file: str) -> None:
        """
        Carica la configurazione da file YAML

        Args:
            config_file: Path al file di configurazione

        Raises:
            ConfigError: se il file non è leggibile o non è YAML valido
        """
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                file_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Error loading configuration file {config_file}: {e}") from e

        if not file_config:
            return
        if not isinstance(file_config, dict):
            raise ConfigError(f"Configuration file {config_file} must contain a mapping")

        for key, value in file_config.items():
            if key in self.NESTED_SECTIONS and isinstance(value, dict):
                self.config.setdefault(key, {})
                self._deep_merge(self.config[key], value)
            else:
                self.config[key] = value

    def _deep_merge(self, base: dict, update: dict) -> None:
        """
        Merge profondo di dizionari nested

        Args:
            base: Dizionario base (modificato in place)
            update: Dizionario con i nuovi valori
        """
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def update_from_args(self, args: Dict[str, Any], section: Optional[str] = None) -> None:
        """
        Aggiorna la configurazione con argomenti da CLI
        Gli argomenti CLI hanno precedenza sul file di configurazione;
        i valori ``None`` vengono ignorati.

        Args:
            args: Dizionario con gli argomenti CLI
            section: Sezione nested da aggiornare (es. ``'join'``), livello radice se None
        """
        if section is None:
            target = self.config
        else:
            if not isinstance(self.config.get(section), dict):
                self.config[section] = {}
            target = self.config[section]
        for key, value in args.items():
            if value is not None:
                target[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Ottiene un valore di configurazione

        Args:
            key: Chiave di configurazione
            default: Valore di default se la chiave non esiste

        Returns:
            Il valore di configurazione
        """
        return self.config.get(key, default)

    def get_all(self) -> Dict[str, Any]:
        """
        Ottiene tutta la configurazione

        Returns:
            Copia profonda del dizionario di configurazione
        """
        return copy.deepcopy(self.config)
