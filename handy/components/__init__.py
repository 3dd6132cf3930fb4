"""
Atomic components.

Each component exposes input/output models, ports, ``run_*`` entry points
and a ``run`` dispatcher.
"""
