"""
Dominios del core.

Cada dominio define:
- Modelos de dominio específicos
- Builders que construyen esos modelos desde datos crudos
- Renderers y perfiles de documento
"""
