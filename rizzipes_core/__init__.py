"""
rizzipes_core
=============

Core de recetas: grafo de dominio (Recipe, Ingredient, Supply, Step, Use),
templates inline ``{{kind:id}}`` en el texto de los pasos y escalado por
porciones.
"""
