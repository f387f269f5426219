"""Static IBAN country table.

Source: SWIFT IBAN Registry
Reference: https://www.swift.com/standards/data-standards/iban-international-bank-account-number

Each entry: country code, country name, total IBAN length, BBAN structure in
SWIFT notation, example IBAN. Countries whose BBAN contains ``c`` segments
accept lower case in those segments, as the registry defines ``c`` as upper
and lower case alphanumeric.

Note: the SEPA flag follows the EPC list of SEPA scheme countries.
"""

from .models import CountryInfo

SEPA_COUNTRY_CODES = frozenset(
    {
        "AD", "AT", "BE", "BG", "CH", "CY", "CZ", "DE", "DK", "EE", "ES", "FI",
        "FR", "GB", "GI", "GR", "HR", "HU", "IE", "IS", "IT", "LI", "LT", "LU",
        "LV", "MC", "MT", "NL", "NO", "PL", "PT", "RO", "SE", "SI", "SK", "SM",
    }
)  # fmt: skip

_TABLE: tuple[tuple[str, str, int, str, str], ...] = (
    # Western Europe
    ("AD", "Andorra", 24, "4!n4!n12!c", "AD1200012030200359100100"),
    ("AT", "Austria", 20, "5!n11!n", "AT611904300234573201"),
    ("BE", "Belgium", 16, "3!n7!n2!n", "BE68539007547034"),
    ("CH", "Switzerland", 21, "5!n12!c", "CH9300762011623852957"),
    ("DE", "Germany", 22, "8!n10!n", "DE89370400440532013000"),
    ("FR", "France", 27, "5!n5!n11!c2!n", "FR1420041010050500013M02606"),
    ("GB", "United Kingdom", 22, "4!a6!n8!n", "GB29NWBK60161331926819"),
    ("IE", "Ireland", 22, "4!a6!n8!n", "IE29AIBK93115212345678"),
    ("LI", "Liechtenstein", 21, "5!n12!c", "LI21088100002324013AA"),
    ("LU", "Luxembourg", 20, "3!n13!c", "LU280019400644750000"),
    ("MC", "Monaco", 27, "5!n5!n11!c2!n", "MC5811222000010123456789030"),
    ("NL", "Netherlands", 18, "4!a10!n", "NL91ABNA0417164300"),
    # Southern Europe
    ("CY", "Cyprus", 28, "3!n5!n16!c", "CY17002001280000001200527600"),
    ("ES", "Spain", 24, "4!n4!n1!n1!n10!n", "ES9121000418450200051332"),
    ("GI", "Gibraltar", 23, "4!a15!c", "GI75NWBK000000007099453"),
    ("GR", "Greece", 27, "3!n4!n16!c", "GR1601101250000000012300695"),
    ("IT", "Italy", 27, "1!a5!n5!n12!c", "IT60X0542811101000000123456"),
    ("MT", "Malta", 31, "4!a5!n18!c", "MT84MALT011000012345MTLCAST001S"),
    ("PT", "Portugal", 25, "4!n4!n11!n2!n", "PT50000201231234567890154"),
    ("SM", "San Marino", 27, "1!a5!n5!n12!c", "SM86U0322509800000000270100"),
    # Northern Europe
    ("DK", "Denmark", 18, "4!n9!n1!n", "DK5000400440116243"),
    ("FI", "Finland", 18, "3!n11!n", "FI2112345600000785"),
    ("FO", "Faroe Islands", 18, "4!n9!n1!n", "FO6264600001631634"),
    ("GL", "Greenland", 18, "4!n9!n1!n", "GL8964710001000206"),
    ("IS", "Iceland", 26, "4!n2!n6!n10!n", "IS140159260076545510730339"),
    ("NO", "Norway", 15, "4!n6!n1!n", "NO9386011117947"),
    ("SE", "Sweden", 24, "3!n16!n1!n", "SE4550000000058398257466"),
    # Central and Eastern Europe
    ("BG", "Bulgaria", 22, "4!a4!n2!n8!c", "BG80BNBG96611020345678"),
    ("CZ", "Czech Republic", 24, "4!n6!n10!n", "CZ6508000000192000145399"),
    ("EE", "Estonia", 20, "2!n2!n11!n1!n", "EE382200221020145685"),
    ("HR", "Croatia", 21, "7!n10!n", "HR1210010051863000160"),
    ("HU", "Hungary", 28, "3!n4!n1!n15!n1!n", "HU42117730161111101800000000"),
    ("LT", "Lithuania", 20, "5!n11!n", "LT121000011101001000"),
    ("LV", "Latvia", 21, "4!a13!c", "LV80BANK0000435195001"),
    ("PL", "Poland", 28, "8!n16!n", "PL61109010140000071219812874"),
    ("RO", "Romania", 24, "4!a16!c", "RO49AAAA1B31007593840000"),
    ("SI", "Slovenia", 19, "5!n8!n2!n", "SI56263300012039086"),
    ("SK", "Slovakia", 24, "4!n6!n10!n", "SK3112000000198742637541"),
    # Balkans and Caucasus
    ("AL", "Albania", 28, "8!n16!c", "AL47212110090000000235698741"),
    ("AZ", "Azerbaijan", 28, "4!a20!c", "AZ21NABZ00000000137010001944"),
    ("BA", "Bosnia and Herzegovina", 20, "3!n3!n8!n2!n", "BA391290079401028494"),
    ("GE", "Georgia", 22, "2!a16!n", "GE29NB0000000101904917"),
    ("MD", "Moldova", 24, "2!c18!c", "MD24AG000225100013104168"),
    ("ME", "Montenegro", 22, "3!n13!n2!n", "ME25505000012345678951"),
    ("MK", "North Macedonia", 19, "3!n10!c2!n", "MK07250120000058984"),
    ("RS", "Serbia", 22, "3!n13!n2!n", "RS35260005601001611379"),
    ("TR", "Turkey", 26, "5!n1!n16!c", "TR330006100519786457841326"),
    # Middle East, Africa and Asia
    ("AE", "United Arab Emirates", 23, "3!n16!n", "AE070331234567890123456"),
    ("BH", "Bahrain", 22, "4!a14!c", "BH67BMAG00001299123456"),
    ("IL", "Israel", 23, "3!n3!n13!n", "IL620108000000099999999"),
    ("KW", "Kuwait", 30, "4!a22!c", "KW81CBKU0000000000001234560101"),
    ("KZ", "Kazakhstan", 20, "3!n13!c", "KZ86125KZT5004100100"),
    ("LB", "Lebanon", 28, "4!n20!c", "LB62099900000001001901229114"),
    ("MU", "Mauritius", 30, "4!a2!n2!n12!n3!n3!a", "MU17BOMM0101101030300200000MUR"),
    ("QA", "Qatar", 29, "4!a21!c", "QA58DOHB00001234567890ABCDEFG"),
    ("SA", "Saudi Arabia", 24, "2!n18!c", "SA0380000000608010167519"),
    ("TN", "Tunisia", 24, "2!n3!n13!n2!n", "TN5910006035183598478831"),
)


def _build(code: str, name: str, length: int, bban: str, example: str) -> CountryInfo:
    return CountryInfo.from_swift(
        code,
        name,
        length,
        bban,
        example,
        allows_lower_case="!c" in bban,
        is_sepa=code in SEPA_COUNTRY_CODES,
    )


COUNTRIES: tuple[CountryInfo, ...] = tuple(_build(*row) for row in _TABLE)
