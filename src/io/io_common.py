# SPECFEMUtils - GPLv3
#
# The SPECFEMUtils Developers, 21st Century
# ---|P------/S----------~Lg----------

'''
IO related exception definitions and utilities.
'''


class FileError(Exception):
    '''
    Base class for errors occurring when loading or saving data.
    '''
    def __init__(self, *args, **kwargs):
        Exception.__init__(self, *args, **kwargs)
        self.context = {}

    def set_context(self, k, v):
        self.context[k] = v

    def __str__(self):
        s = Exception.__str__(self)
        if not self.context:
            return s

        lines = []
        for k in sorted(self.context.keys()):
            lines.append('%s: %s' % (k, self.context[k]))

        return '%s\n%s' % (s, '\n'.join(lines))


class FileLoadError(FileError):
    '''
    Raised when a problem occurred while loading of a file.
    '''


class FileSaveError(FileError):
    '''
    Raised when a problem occurred while saving of a file.
    '''


class FormatError(FileLoadError):
    '''
    Raised when the structure of a file does not match its format.

    The line number (1-based) and the raw line are available in
    :py:attr:`context` under ``'line'`` and ``'content'``.
    '''

    def __init__(self, msg, line=None, content=None):
        FileLoadError.__init__(self, msg)
        if line is not None:
            self.set_context('line', line)

        if content is not None:
            self.set_context('content', repr(content))

    @property
    def line(self):
        return self.context.get('line', None)


class ParseError(FormatError):
    '''
    Raised when a token which should be numeric cannot be converted.
    '''

    def __init__(self, msg, field=None, token=None, line=None, content=None):
        FormatError.__init__(self, msg, line=line, content=content)
        if field is not None:
            self.set_context('field', field)

        if token is not None:
            self.set_context('token', repr(token))


class ParameterTypeError(FileSaveError, TypeError):
    '''
    Raised when a parameter value has a kind which cannot be written.
    '''

    def __init__(self, key, value):
        FileSaveError.__init__(
            self, 'unexpected type of value %r for key "%s"' % (value, key))
        self.set_context('key', key)
        self.set_context('value', repr(value))


class ParameterValueError(FileSaveError, ValueError):
    '''
    Raised when a parameter name or string value cannot be read back.
    '''

    def __init__(self, msg, key, value=None):
        FileSaveError.__init__(self, msg)
        self.set_context('key', key)
        if value is not None:
            self.set_context('value', repr(value))


class ArgumentError(ValueError):
    '''
    Raised when arguments given by the caller are inconsistent.
    '''


def with_filename(e, filename):
    if filename is not None and isinstance(e, FileError):
        e.set_context('filename', filename)

    return e
