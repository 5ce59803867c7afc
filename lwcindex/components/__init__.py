"""Components layer - domain building blocks.

Components are leaf modules that:
- Do NOT import services, workflows, or interfaces
- ARE imported and used BY workflows and services
- May import from: helpers, other components

Architecture:
- helpers/ = stdlib-only utilities (pure, stateless)
- components/ = registry, catalog loading, workspace discovery (this layer)
- workflows/ = indexing orchestration over components
- services/ = wiring, config, long-lived resources (watchers)
- interfaces/ = CLI presentation
"""
