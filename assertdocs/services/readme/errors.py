class DocGenerationError(ValueError):
    """Base class for every failure that aborts a README generation run."""


class MissingClassDocError(DocGenerationError):
    def __init__(self, class_name: str):
        self.class_name = class_name
        super().__init__(f'Missing class doc for "{class_name}".')


class MissingMethodDocError(DocGenerationError):
    def __init__(self, class_name: str, method_name: str):
        self.class_name = class_name
        self.method_name = method_name
        super().__init__(f'Missing doc for "{class_name}:{method_name}".')


class EmptyDescriptionError(DocGenerationError):
    def __init__(self, class_name: str, method_name: str):
        self.class_name = class_name
        self.method_name = method_name
        super().__init__(f'Empty description for doc "{class_name}:{method_name}".')


class ParameterMismatchError(DocGenerationError):
    """``parameter`` is documented but not declared, or declared but not documented."""

    def __init__(self, class_name: str, method_name: str, parameter: str):
        self.class_name = class_name
        self.method_name = method_name
        self.parameter = parameter
        super().__init__(
            f'Parameters description in doc of method "{class_name}:{method_name}" '
            f'mismatched for "{parameter}".'
        )


class MalformedParamTagError(DocGenerationError):
    def __init__(self, doc: str):
        self.doc = doc
        bar = "-" * 18
        super().__init__(f"Matching failed for:\n{bar}\n{doc}\n{bar}")


class MethodParseError(DocGenerationError):
    """Wraps a parser failure with the class and method it happened in."""

    def __init__(self, class_name: str, method_name: str):
        self.class_name = class_name
        self.method_name = method_name
        super().__init__(f'Exception when parsing "{class_name}", "{method_name}".')


class ReflectionError(DocGenerationError):
    def __init__(self, class_name: str):
        self.class_name = class_name
        super().__init__(f'Class "{class_name}" does not exist.')


class ManifestError(DocGenerationError):
    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid manifest {path}: {reason}")
