"""
The MODEL layer contains pure data structures: the model constants, the
utterance structure, the input parser and file I/O.
It has no knowledge of plotting.
"""
