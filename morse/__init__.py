"""Morse code converter: plain text to Morse code and back."""

__version__ = "1.0.0"
__author__ = "Diego Rubio Carrera"
__email__ = "diegorubiocarrera@gmail.com"
__program__ = "TIK"
