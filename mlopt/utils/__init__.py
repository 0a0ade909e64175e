"""Collaborators shared by the optimizers: shuffling and logging setup."""

from .shuffle import Shuffler
from .log import setup_logger
