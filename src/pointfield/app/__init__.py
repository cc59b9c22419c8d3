"""
The APP layer is the host side of the plugin: entities, startup stages,
mesh assets and the inspectable-component registry.
"""
