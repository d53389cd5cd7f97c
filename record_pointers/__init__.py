"""JSON Pointer (RFC 6901) for schema-described records."""
__author__ = 'Vladimir Bolshakov'
__email__ = 'vovanbo@gmail.com'
__version__ = '0.1.0'
VERSION = __version__

from record_pointers.pointer import RecordElementPointer, parse
