from .graph import Graph, NodeNotFoundError
from .node import Node, State, StateMismatchError
from .path import Path
from .problem import Problem
