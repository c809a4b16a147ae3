"""
Managers package for the Alarm Flow Toolkit

Provides the lookups and grouping that sit between records and output:
- Unit links (config group -> units, facility -> fail-safe group)
- Flow bundling (alarm rows -> delivery rules)
"""

from .unit_link_index import UnitLink, UnitLinkIndex
from .flow_bundler import FlowBundle, FlowBundler, bundle_key

__all__ = ['UnitLink', 'UnitLinkIndex', 'FlowBundle', 'FlowBundler', 'bundle_key']
