"""
Storage configuration for Burger Book application.

Chooses the local key-value backend: SQLite on disk by default, or an in-memory
store for demos.
"""

import os
import streamlit as st
from typing import Dict, Any

from services.storage_service import KeyValueStore, get_storage_service
from utils import get_logger

logger = get_logger(__name__)


class StorageConfig:
    """Local storage configuration manager"""

    @staticmethod
    def get_storage_config() -> Dict[str, Any]:
        """Get storage configuration"""
        storage_type = os.getenv('BURGER_STORAGE_TYPE', 'sqlite').lower()

        if storage_type == 'memory':
            return {
                'type': 'memory',
                'path': ':memory:',
                'description': 'In-memory storage (cleared on restart)'
            }

        if storage_type != 'sqlite':
            st.warning(f"Unknown storage type '{storage_type}', using SQLite")

        return {
            'type': 'sqlite',
            'path': StorageConfig._get_sqlite_path(),
            'description': 'SQLite key-value storage'
        }

    @staticmethod
    def _get_sqlite_path() -> str:
        """Get SQLite storage path"""
        # Try environment variable first
        db_path = os.getenv('BURGER_STORAGE_PATH')
        if db_path:
            return db_path

        # Try Streamlit secrets
        try:
            if 'BURGER_STORAGE_PATH' in st.secrets:
                return st.secrets['BURGER_STORAGE_PATH']
        except Exception as e:
            # No secrets.toml configured
            logger.debug(f"Streamlit secrets unavailable: {e}")

        return 'burger_book.db'


def get_configured_storage() -> KeyValueStore:
    """Create the configured key-value store"""
    config = StorageConfig.get_storage_config()
    return get_storage_service(config['type'], config['path'])


def get_storage_info() -> Dict[str, Any]:
    """Get storage configuration info"""
    config = StorageConfig.get_storage_config()

    return {
        'type': config['type'],
        'description': config['description'],
        'path': config.get('path', 'Unknown'),
        'location': 'Local file' if config['type'] == 'sqlite' else 'Process memory'
    }
