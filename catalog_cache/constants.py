"""
Catalog Cache Global Constants

Centralized location for all system-wide constants used across the application.
"""

# Cache region shared by every catalog facet
CATALOG_REGION_NAME = "Catalog-Cache-Region"

# Cache key layout: "<prefix><namespace>, <part>, <part>..."
CACHE_KEY_PREFIX = "Catalog-"
CACHE_KEY_SEPARATOR = ", "

# Application Constants
APP_NAME = "Catalog Cache"
APP_VERSION = "1.0.0"
