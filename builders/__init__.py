"""
Builders package for the Alarm Flow Toolkit

Builds the pieces of the output document:
- DestinationBuilder: recipient slots -> ordered destinations
- ParameterBuilder: ordered parameter attributes per flow
- AlarmDefinitionBuilder: deduplicated alarm definitions
- DocumentAssembler / transform(): the complete document
"""

from .destination_builder import Destination, DestinationBuilder, Target
from .parameter_builder import ParameterAttribute, ParameterBuilder, literal
from .alarm_definitions import AlarmDefinition, AlarmDefinitionBuilder
from .document_assembler import DocumentAssembler, LoadedTables, extract_tables, flow_name, transform

__all__ = [
    'AlarmDefinition',
    'AlarmDefinitionBuilder',
    'Destination',
    'DestinationBuilder',
    'DocumentAssembler',
    'LoadedTables',
    'ParameterAttribute',
    'ParameterBuilder',
    'Target',
    'extract_tables',
    'flow_name',
    'literal',
    'transform',
]
