"""
Custom profile loader for user-defined model expressions.
"""

import ast
import json

import numpy as np

from ..errors import InvalidArgument


_RESERVED_NAMES = {'x', 'np'}


def _expression_parameters(func_str):
    """Free names of an expression in order of first appearance."""
    try:
        tree = ast.parse(func_str, mode='eval')
    except SyntaxError as e:
        raise InvalidArgument(f"Invalid profile expression {func_str!r}: {e}") from e
    
    nodes = sorted((node for node in ast.walk(tree) if isinstance(node, ast.Name)),
                   key=lambda node: (node.lineno, node.col_offset))
    names = []
    for node in nodes:
        if node.id not in _RESERVED_NAMES and node.id not in names:
            names.append(node.id)
    return names


def load_custom_profile(filepath):
    """
    Load a custom profile model from a .txt or .json file.
    
    Parameters
    ----------
    filepath : str
        Path to custom profile definition file
    
    Returns
    -------
    callable
        Model ``f(x, par)`` with a ``parameter_names`` attribute
    
    Notes
    -----
    Expected JSON format:
    {
      "name": "custom_peak",
      "function": "amplitude * np.exp(-x/decay)",
      "parameters": ["amplitude", "decay"],
      "description": "Exponential decay peak"
    }
    
    A .txt file holds the expression only. When "parameters" is missing
    the free names of the expression are used, in order of appearance.
    The expression is evaluated with numpy (np) and x available.
    """
    with open(filepath, 'r') as f:
        if str(filepath).endswith('.json'):
            profile_def = json.load(f)
        else:
            profile_def = {
                'name': 'custom',
                'function': f.read().strip(),
            }
    
    func_str = profile_def['function']
    params = list(profile_def.get('parameters') or _expression_parameters(func_str))
    if not params:
        raise InvalidArgument(f"Profile expression {func_str!r} has no parameters")
    code = compile(func_str, str(filepath), 'eval')
    
    def custom_function(x, par):
        if len(par) != len(params):
            raise InvalidArgument(f"Expected {len(params)} parameters, got {len(par)}")
        local_vars = {'np': np, 'x': np.asarray(x)}
        local_vars.update(zip(params, par))
        return eval(code, {"__builtins__": {}}, local_vars)
    
    custom_function.__name__ = profile_def.get('name', 'custom')
    custom_function.__doc__ = profile_def.get('description', 'Custom profile function')
    custom_function.parameter_names = tuple(params)
    
    return custom_function
