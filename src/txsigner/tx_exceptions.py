class TxSignerError(Exception):
    def __init__(self, msg):
        super(TxSignerError, self).__init__(msg)

        self.msg = msg


class InvalidAddressError(TxSignerError):
    def __init__(self, msg):
        super(InvalidAddressError, self).__init__(msg)


class InvalidFieldError(TxSignerError):
    def __init__(self, msg):
        super(InvalidFieldError, self).__init__(msg)


class InvalidPayloadError(TxSignerError):
    def __init__(self, msg):
        super(InvalidPayloadError, self).__init__(msg)


class InvalidKeyError(TxSignerError):
    def __init__(self, msg):
        super(InvalidKeyError, self).__init__(msg)


class SigningFailureError(TxSignerError):
    def __init__(self, msg):
        super(SigningFailureError, self).__init__(msg)


class InvalidRecoveryIdError(TxSignerError):
    def __init__(self, msg):
        super(InvalidRecoveryIdError, self).__init__(msg)


class RecoveryFailureError(TxSignerError):
    def __init__(self, msg):
        super(RecoveryFailureError, self).__init__(msg)


class DecodeError(TxSignerError):
    def __init__(self, msg):
        super(DecodeError, self).__init__(msg)
