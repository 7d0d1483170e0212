"""aco-draw — decode Adobe .aco colour swatch files and render them as a grid."""

__version__ = '0.1.0'
