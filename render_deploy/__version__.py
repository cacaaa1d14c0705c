"""Version information for render-deploy package"""

__version__ = "1.0.0"
__version_info__ = (1, 0, 0)
__author__ = "vistart"
__email__ = "i@vistart.me"
__license__ = "MIT"
