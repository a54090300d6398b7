"""Worked solutions to the behaviour the exercises ask for."""