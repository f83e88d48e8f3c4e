"""
Costuras del core con sus colaboradores.

- Protocols de fuente de datos y de render (`abstractions`)
"""
