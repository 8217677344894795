from .module_base import CommandModule
from .feature_management import FeatureCommand, FeatureManagement

__all__ = ["CommandModule", "FeatureCommand", "FeatureManagement"]
