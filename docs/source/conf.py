import os
import sys
sys.path.insert(0, os.path.abspath('../../'))

project = 'Wilder Smoothing'
copyright = '2025, wilder-smoothing contributors'
author = 'wilder-smoothing contributors'

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.viewcode',
]

templates_path = ['_templates']
exclude_patterns = []

html_theme = 'alabaster'
