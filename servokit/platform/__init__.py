""" Platform specific collaborators. """

__author__ = "Alexander Sowitzki"
