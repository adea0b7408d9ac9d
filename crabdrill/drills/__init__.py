"""Worked solutions to many of the exercises, with one module per topic."""