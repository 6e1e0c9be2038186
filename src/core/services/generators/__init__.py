"""
Generators — produce C# source from resolved value object descriptors.

``value_object`` emits the members, ``source_file`` wraps them in a
complete ``.g.cs`` file and returns a ``GeneratedFile``.  Both write
through ``code_writer.CodeWriter``.
"""
