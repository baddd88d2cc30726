"""Reads namenode endpoint settings from Hadoop site configuration files."""
import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Dict, Optional, Union
from urllib.parse import urlparse

from .constants import BenchmarkConstants
from .exceptions import ConfigError


# Configure logging
logger = logging.getLogger(__name__)


class HadoopSiteConfig:
    """Properties merged from ``core-site.xml`` and ``hdfs-site.xml``."""

    SITE_FILES = ("core-site.xml", "hdfs-site.xml")

    def __init__(self, properties: Dict[str, str]):
        self.properties = properties

    @staticmethod
    def parse_site_file(path: Union[Path, str]) -> Dict[str, str]:
        """
        Parse the ``<property><name/><value/></property>`` entries of one file.

        Raises:
            ConfigError: If the file is not well-formed XML.
        """
        try:
            root = ET.parse(path).getroot()
        except ET.ParseError as e:
            raise ConfigError(f"Malformed Hadoop configuration {path}: {e}") from e

        properties = {}
        for prop in root.iter("property"):
            name = prop.findtext("name")
            if name:
                properties[name.strip()] = (prop.findtext("value") or "").strip()
        return properties

    @classmethod
    def load(cls, conf_dir: Union[Path, str]) -> "HadoopSiteConfig":
        """Load the site files found in ``conf_dir``; later files override earlier ones."""
        properties: Dict[str, str] = {}
        for name in cls.SITE_FILES:
            path = Path(conf_dir) / name
            if path.exists():
                logger.info(f"Loading Hadoop configuration from {path}")
                properties.update(cls.parse_site_file(path))
        return cls(properties)

    def webhdfs_url(self) -> Optional[str]:
        """Derive the namenode HTTP endpoint, or None when nothing is configured."""
        http_address = self.properties.get("dfs.namenode.http-address")
        if http_address:
            if "://" in http_address:
                return http_address
            return f"http://{http_address}"

        default_fs = self.properties.get("fs.defaultFS")
        if default_fs:
            host = urlparse(default_fs).hostname
            if host:
                return f"http://{host}:{BenchmarkConstants.WEBHDFS_DEFAULT_PORT}"
        return None

    def user(self) -> Optional[str]:
        return self.properties.get("hadoop.http.staticuser.user") or None
