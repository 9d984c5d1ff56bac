from .library import ComponentProperties, COMPONENTS, component_props, component_eos
