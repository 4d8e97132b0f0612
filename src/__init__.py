from src.dary_heap.dary_heap import DaryHeap
from src.dary_heap.loader import load_nodes, parse_nodes
from src.dary_heap.menu import HeapMenu
