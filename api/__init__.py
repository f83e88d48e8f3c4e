"""
API HTTP para rizzipes-core.

Esta capa expone endpoints REST que usan el core interno (rizzipes_core.engine)
para listar recetas y servirlas escaladas por porciones.

La API está diseñada para ser consumida por:
- UI web
- Clientes externos
- Scripts de automatización
"""
