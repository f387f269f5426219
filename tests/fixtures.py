"""Sample IBANs shared by the test suite."""

NL_IBAN = "NL91ABNA0417164300"
NO_IBAN = "NO9386011117947"
MT_IBAN = "MT84MALT011000012345MTLCAST001S"

# One digit changed from a valid IBAN
TAMPERED_IBANS = ["NL92ABNA0417164300", "NO9486011117947"]
