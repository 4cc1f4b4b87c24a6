from .build_definition_repository import BuildDefinitionRepository, parse_build_definition

__all__ = [
    'BuildDefinitionRepository',
    'parse_build_definition'
]
