from .reducer import convert_graph_array, format_entries, format_entry, reduce_entries

__all__ = ['convert_graph_array', 'format_entries', 'format_entry', 'reduce_entries']
