from .action_manifest_repository import ActionManifestRepository

__all__ = [
    'ActionManifestRepository'
]
