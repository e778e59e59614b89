'''
Unit conversion.

Linear units are stored as their size in the category's base unit, written
as decimal strings so the tables are exact. Temperatures are not linear and
convert through Celsius with a pair of functions instead.
'''

from collections import namedtuple

from .mathops import CalculatorMath
from .util import UnknownCategory, UnknownUnit


# factor is a decimal string, or a function of the CalculatorMath giving one.
Unit = namedtuple('Unit', ['factor', 'description'])
# to_base and from_base take (math, value) and return an operand string.
FunctionUnit = namedtuple('FunctionUnit',
                          ['to_base', 'from_base', 'description'])


def _data_units():
    units = {
        'B': Unit('1', 'Byte'),
        'n': Unit('0.5', 'Nibble'),
        'b': Unit('0.125', 'Bit'),
    }
    prefixes = [('k', 'Kilo', 'Kibi'),
                ('M', 'Mega', 'Mebi'),
                ('G', 'Giga', 'Gibi'),
                ('T', 'Tera', 'Tebi'),
                ('P', 'Peta', 'Pebi'),
                ('E', 'Exa', 'Exbi'),
                ('Z', 'Zetta', 'Zebi'),
                ('Y', 'Yotta', 'Yobi')]
    for power, (prefix, decimal, binary) in enumerate(prefixes, start=1):
        units[prefix + 'iB'] = Unit(str(1024 ** power), binary + 'byte')
        units[prefix + 'B'] = Unit(str(1000 ** power), decimal + 'byte')
        units[prefix + 'ib'] = Unit(str(1024 ** power // 8), binary + 'bit')
        units[prefix + 'b'] = Unit(str(1000 ** power // 8), decimal + 'bit')
    return units


def _pi_over(divisor):
    return lambda math: math.div(math.get_constant('pi'), divisor)


def _celsius():
    return FunctionUnit(lambda math, value: value,
                        lambda math, value: value,
                        'Celsius')


def _offset_scale(offset, description):
    '''
    Temperature scale with degrees 9/5 the size of Celsius ones.
    '''
    def to_base(math, value):
        return math.div(math.mul(math.sub(value, offset), '5'), '9')

    def from_base(math, value):
        return math.add(math.div(math.mul(value, '9'), '5'), offset)

    return FunctionUnit(to_base, from_base, description)


def _kelvin():
    return FunctionUnit(lambda math, value: math.sub(value, '273.15'),
                        lambda math, value: math.add(value, '273.15'),
                        'Kelvin')


UNITS = {
    'length': {
        'pm': Unit('0.000000000001', 'Picometer'),
        'nm': Unit('0.000000001', 'Nanometer'),
        'μm': Unit('0.000001', 'Micrometer'),
        'mm': Unit('0.001', 'Millimeter'),
        'cm': Unit('0.01', 'Centimeter'),
        'm': Unit('1', 'Meter'),
        'km': Unit('1000', 'Kilometer'),
        'in': Unit('0.0254', 'Inch'),
        'ft': Unit('0.3048', 'Foot'),
        'yd': Unit('0.9144', 'Yard'),
        'mi': Unit('1609.344', 'Mile'),
        'chi': Unit('0.0303', "Ch'i (Inch)"),
        'chok': Unit('0.303', "Ch'ŏk (Foot)"),
        'chg': Unit('3.03', 'Chang (Fathom)'),
        'ri': Unit('393', 'Ri (Village Distance)'),
        'au': Unit('149597870700', 'Astronomical Unit'),
        'ly': Unit('9460730472580800', 'Light Year'),
        'pc': Unit('30856775814913672', 'Parsec'),
    },
    'area': {
        'mm²': Unit('0.000001', 'Square Millimeter'),
        'cm²': Unit('0.0001', 'Square Centimeter'),
        'm²': Unit('1', 'Square Meter'),
        'km²': Unit('1000000', 'Square Kilometer'),
        'in²': Unit('0.00064516', 'Square Inch'),
        'ft²': Unit('0.09290304', 'Square Foot'),
        'yd²': Unit('0.83612736', 'Square Yard'),
        'mi²': Unit('2589988.110336', 'Square Mile'),
        'ha': Unit('10000', 'Hectare'),
        'a': Unit('100', 'Are'),
        'ac': Unit('4046.8564224', 'Acre'),
        'py': Unit('3.3025', 'Pyeong'),
        'tb': Unit('330.58', 'Tanbo (Are)'),
        'k': Unit('3305.8', 'Kyŏl (Hectare)'),
    },
    'volume': {
        'mm³': Unit('0.000000001', 'Cubic Millimeter'),
        'cm³': Unit('0.000001', 'Cubic Centimeter'),
        'm³': Unit('1', 'Cubic Meter'),
        'km³': Unit('1000000000', 'Cubic Kilometer'),
        'in³': Unit('0.000016387064', 'Cubic Inch'),
        'ft³': Unit('0.028316846592', 'Cubic Foot'),
        'yd³': Unit('0.764554857984', 'Cubic Yard'),
        'mi³': Unit('4168181825.440579584', 'Cubic Mile'),
        'ml': Unit('0.000001', 'Milliliter'),
        'l': Unit('0.001', 'Liter'),
        'kl': Unit('1', 'Kiloliter'),
        'gal': Unit('0.003785411784', 'Gallon'),
        'to': Unit('0.0018', 'Toe (Liter)'),
        'mal': Unit('0.018', 'Mal (Decaliter)'),
        'seom': Unit('0.18', 'Sŏm (Hectoliter)'),
    },
    'weight': {
        'mg': Unit('0.001', 'Milligram'),
        'g': Unit('1', 'Gram'),
        'kg': Unit('1000', 'Kilogram'),
        'ton': Unit('1000000', 'Ton'),
        'oz': Unit('28.349523125', 'Ounce'),
        'lb': Unit('453.59237', 'Pound'),
        'geun': Unit('600', 'Geun (Catty)'),
        'nyang': Unit('37.5', 'Nyang (Tael)'),
        'don': Unit('3.75', 'Don (Mace)'),
        'jeon': Unit('0.375', 'Jeon (Candareen)'),
        'gwan': Unit('3750', 'Gwan (Kwan)'),
    },
    'angle': {
        'rad': Unit('1', 'Radian'),
        'urad': Unit('0.000001', 'Microradian'),
        'deg': Unit(_pi_over('180'), 'Degree'),
        'grad': Unit(_pi_over('200'), 'Gradian'),
        'arcm': Unit(_pi_over('10800'), 'Minute of arc'),
        'arcs': Unit(_pi_over('648000'), 'Second of arc'),
    },
    'temperature': {
        '°C': _celsius(),
        '°F': _offset_scale('32', 'Fahrenheit'),
        'K': _kelvin(),
        '°R': _offset_scale('491.67', 'Rankine'),
    },
    'energy': {
        'J': Unit('1', 'Joule'),
        'kJ': Unit('1000', 'Kilojoule'),
        'MJ': Unit('1000000', 'Megajoule'),
        'GJ': Unit('1000000000', 'Gigajoule'),
        'cal': Unit('4.184', 'Calorie'),
        'kcal': Unit('4184', 'Kilocalorie'),
        'Wh': Unit('3600', 'Watt-hour'),
        'kWh': Unit('3600000', 'Kilowatt-hour'),
        'MWh': Unit('3600000000', 'Megawatt-hour'),
        'GWh': Unit('3600000000000', 'Gigawatt-hour'),
        'eV': Unit('0.0000000000000000001602176634', 'Electronvolt'),
        'keV': Unit('0.0000000000000001602176634', 'Kiloelectronvolt'),
        'MeV': Unit('0.0000000000001602176634', 'Megaelectronvolt'),
        'GeV': Unit('0.0000000001602176634', 'Gigaelectronvolt'),
        'BTU': Unit('1055.06', 'British Thermal Unit'),
        'erg': Unit('0.0000001', 'Erg'),
    },
    'force': {
        'N': Unit('1', 'Newton'),
        'kN': Unit('1000', 'Kilonewton'),
        'dyn': Unit('0.00001', 'Dyne'),
        'lbf': Unit('4.44822', 'Pound-force'),
        'kgf': Unit('9.80665', 'Kilogram-force'),
    },
    'time': {
        'ps': Unit('0.000000000001', 'Picosecond'),
        'ns': Unit('0.000000001', 'Nanosecond'),
        'μs': Unit('0.000001', 'Microsecond'),
        'ms': Unit('0.001', 'Millisecond'),
        's': Unit('1', 'Second'),
        'm': Unit('60', 'Minute'),
        'h': Unit('3600', 'Hour'),
        'd': Unit('86400', 'Day'),
        'w': Unit('604800', 'Week'),
        'mon': Unit('2628000', 'Month'),
        'year': Unit('31536000', 'Year'),
        'decade': Unit('315360000', 'Decade'),
        'century': Unit('3153600000', 'Century'),
    },
    'speed': {
        'km/h': Unit('1', 'Kilometer per Hour'),
        'm/s': Unit('3.6', 'Meter per Second'),
        'ft/s': Unit('1.09728', 'Foot per Second'),
        'mi/h': Unit('1.609344', 'Mile per Hour'),
        'knot': Unit('1.852', 'Knot'),
    },
    'pressure': {
        'Pa': Unit('1', 'Pascal'),
        'hPa': Unit('100', 'Hectopascal'),
        'kPa': Unit('1000', 'Kilopascal'),
        'MPa': Unit('1000000', 'Megapascal'),
        'bar': Unit('100000', 'Bar'),
        'atm': Unit('101325', 'Standard Atmosphere'),
        'psi': Unit('6894.75729316836', 'Pound per Square Inch'),
        'ksi': Unit('6894757.29316836', 'Kilopound per Square Inch'),
    },
    'data': _data_units(),
    'frequency': {
        'Hz': Unit('1', 'Hertz'),
        'kHz': Unit('1000', 'Kilohertz'),
        'MHz': Unit('1000000', 'Megahertz'),
        'GHz': Unit('1000000000', 'Gigahertz'),
        'THz': Unit('1000000000000', 'Terahertz'),
        'rpm': Unit(lambda math: math.div('1', '60'),
                    'Revolutions per minute'),
    },
}


class UnitConverter:
    '''
    Converts values between units of one category.

    :param math: CalculatorMath doing the arithmetic, at its precision.
    '''

    def __init__(self, math=None):
        self.math = CalculatorMath() if math is None else math
        self._factors = {
            category: {unit: self._factor(unit_data)
                       for unit, unit_data in units.items()
                       if isinstance(unit_data, Unit)}
            for category, units in UNITS.items()
        }

    def _factor(self, unit):
        if callable(unit.factor):
            return unit.factor(self.math)
        return unit.factor

    def categories(self):
        return list(UNITS)

    def _category(self, category):
        try:
            return UNITS[category]
        except KeyError:
            raise UnknownCategory(
                'No such unit category {!r}'.format(category)) from None

    def _unit(self, category, unit):
        try:
            return self._category(category)[unit]
        except KeyError:
            raise UnknownUnit(
                'No such unit {}.{}'.format(category, unit)) from None

    def units(self, category):
        return list(self._category(category))

    def describe(self, category, unit):
        return self._unit(category, unit).description

    def factor(self, category, unit):
        '''
        Size of ``unit`` in the category's base unit; None for temperatures.
        '''
        self._unit(category, unit)
        return self._factors[category].get(unit)

    def convert(self, category, value, from_unit, to_unit):
        '''
        Convert ``value`` from one unit to another of the same category.
        '''
        source = self._unit(category, from_unit)
        target = self._unit(category, to_unit)
        if isinstance(source, FunctionUnit):
            base = source.to_base(self.math, value)
        else:
            base = self.math.mul(value, self._factors[category][from_unit])
        if isinstance(target, FunctionUnit):
            return target.from_base(self.math, base)
        return self.math.div(base, self._factors[category][to_unit])
