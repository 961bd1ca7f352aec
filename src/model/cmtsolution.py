# SPECFEMUtils - GPLv3
#
# The SPECFEMUtils Developers, 21st Century
# ---|P------/S----------~Lg----------

from specfemutils.moment_tensor import MomentTensor

__all__ = ['CMTSolution']

field_names = (
    'description', 'event_name', 'time_shift', 'half_duration',
    'latitude', 'longitude', 'depth', 'moment_tensor')


class CMTSolution(object):
    '''
    Seismic source description as found in a SPECFEM CMTSOLUTION file

    :param description: free text header line, kept verbatim, must not
        contain line breaks
    :param event_name: event identifier, a single token without whitespace
    :param time_shift: time shift [s]
    :param half_duration: half duration of the source time function [s]
    :param latitude: centroid latitude [deg]
    :param longitude: centroid longitude [deg]
    :param depth: centroid depth [km]
    :param moment_tensor: :py:class:`~specfemutils.moment_tensor.MomentTensor`
        or sequence of the six components ``(rr, tt, pp, rt, rp, tp)``
        [dyne-cm]

    Objects are immutable, use :py:meth:`replace` to get modified copies.
    Values which could not be read back from a CMTSOLUTION file raise
    :py:exc:`~specfemutils.io.io_common.ArgumentError`.
    '''

    __slots__ = tuple('_' + name for name in field_names)

    def __init__(
            self, description, event_name, time_shift, half_duration,
            latitude, longitude, depth, moment_tensor):

        from specfemutils.io.io_common import ArgumentError

        description = str(description)
        event_name = str(event_name)

        if '\n' in description or '\r' in description:
            raise ArgumentError(
                'CMTSolution description must be a single line: %r'
                % description)

        if event_name.split() != [event_name]:
            raise ArgumentError(
                'CMTSolution event name must be a single non-empty token '
                'without whitespace: %r' % event_name)

        if not isinstance(moment_tensor, MomentTensor):
            moment_tensor = MomentTensor.from_values(moment_tensor)

        for name, value in [
                ('description', description),
                ('event_name', event_name),
                ('time_shift', float(time_shift)),
                ('half_duration', float(half_duration)),
                ('latitude', float(latitude)),
                ('longitude', float(longitude)),
                ('depth', float(depth)),
                ('moment_tensor', moment_tensor)]:

            object.__setattr__(self, '_' + name, value)

    def __setattr__(self, name, value):
        raise AttributeError('CMTSolution objects are immutable')

    @property
    def description(self):
        return self._description

    @property
    def event_name(self):
        return self._event_name

    @property
    def time_shift(self):
        return self._time_shift

    @property
    def half_duration(self):
        return self._half_duration

    @property
    def latitude(self):
        return self._latitude

    @property
    def longitude(self):
        return self._longitude

    @property
    def depth(self):
        return self._depth

    @property
    def moment_tensor(self):
        return self._moment_tensor

    def as_dict(self):
        return dict((name, getattr(self, name)) for name in field_names)

    def replace(self, **kwargs):
        '''
        Get a copy with some of the fields changed.
        '''

        unknown = set(kwargs) - set(field_names)
        if unknown:
            raise TypeError(
                'unknown CMTSolution field(s): %s'
                % ', '.join(sorted(unknown)))

        d = self.as_dict()
        d.update(kwargs)
        return CMTSolution(**d)

    def __eq__(self, other):
        if not isinstance(other, CMTSolution):
            return NotImplemented

        return self.as_dict() == other.as_dict()

    def __hash__(self):
        return hash(tuple(getattr(self, name) for name in field_names))

    def __repr__(self):
        return 'CMTSolution(%s)' % ', '.join(
            '%s=%r' % (name, getattr(self, name)) for name in field_names)
