"""
Shaderpad - GLSL Lexicon
Fixed vocabularies used to classify identifier-shaped words.

The sets are not exhaustive: a name missing from all three simply
classifies as a plain identifier.
"""

KEYWORDS = frozenset({
    # Control flow
    'if', 'else', 'for', 'while', 'do', 'switch', 'case', 'default',
    'break', 'continue', 'return', 'discard',

    # Storage / parameter qualifiers
    'const', 'attribute', 'uniform', 'varying', 'buffer', 'shared',
    'coherent', 'volatile', 'restrict', 'readonly', 'writeonly',
    'layout', 'centroid', 'flat', 'smooth', 'noperspective', 'patch',
    'sample', 'in', 'out', 'inout', 'invariant', 'precise',

    # Precision
    'highp', 'mediump', 'lowp', 'precision',
})

TYPES = frozenset({
    # Scalars
    'void', 'bool', 'int', 'uint', 'float', 'double',

    # Vectors
    'vec2', 'vec3', 'vec4',
    'bvec2', 'bvec3', 'bvec4',
    'ivec2', 'ivec3', 'ivec4',
    'uvec2', 'uvec3', 'uvec4',

    # Matrices
    'mat2', 'mat3', 'mat4',
    'mat2x2', 'mat2x3', 'mat2x4',
    'mat3x2', 'mat3x3', 'mat3x4',
    'mat4x2', 'mat4x3', 'mat4x4',

    # Samplers
    'sampler2D', 'isampler2D', 'usampler2D',
    'sampler3D', 'isampler3D', 'usampler3D',
    'samplerCube', 'isamplerCube', 'usamplerCube',
    'sampler2DShadow', 'samplerCubeShadow',
    'sampler2DArray', 'isampler2DArray', 'usampler2DArray',
    'sampler2DArrayShadow',
    'samplerBuffer', 'isamplerBuffer', 'usamplerBuffer',
    'sampler2DMS', 'isampler2DMS', 'usampler2DMS',
    'sampler2DMSArray', 'isampler2DMSArray', 'usampler2DMSArray',
})

BUILTINS = frozenset({
    # Angle & trigonometry
    'radians', 'degrees', 'sin', 'cos', 'tan', 'asin', 'acos', 'atan',
    'sinh', 'cosh', 'tanh', 'asinh', 'acosh', 'atanh',

    # Exponential
    'pow', 'exp', 'log', 'exp2', 'log2', 'sqrt', 'inversesqrt',

    # Common
    'abs', 'sign', 'floor', 'trunc', 'round', 'roundEven', 'ceil',
    'fract', 'mod', 'modf', 'min', 'max', 'clamp', 'mix', 'step',
    'smoothstep',

    # Geometric
    'length', 'distance', 'dot', 'cross', 'normalize', 'faceforward',
    'reflect', 'refract',

    # Matrix
    'matrixCompMult', 'outerProduct', 'transpose', 'determinant', 'inverse',

    # Vector relational
    'lessThan', 'lessThanEqual', 'greaterThan', 'greaterThanEqual',
    'equal', 'notEqual', 'any', 'all', 'not',

    # Texture lookup
    'texture', 'textureLod', 'textureProj', 'textureLodProj',
    'textureGrad', 'textureSize',

    # Derivatives
    'dFdx', 'dFdy', 'fwidth',

    # Built-in variables
    'gl_Position', 'gl_FragCoord', 'gl_FragColor', 'gl_FragData',
    'gl_PointCoord', 'gl_PointSize', 'gl_VertexID', 'gl_InstanceID',
    'gl_FrontFacing', 'gl_DepthRange',
})


def is_keyword(name: str) -> bool:
    return name in KEYWORDS


def is_type(name: str) -> bool:
    return name in TYPES


def is_builtin(name: str) -> bool:
    return name in BUILTINS


def classify_word(name: str) -> str:
    """Kind name for an identifier-shaped word: keyword > type > builtin > identifier"""
    if name in KEYWORDS:
        return 'keyword'
    if name in TYPES:
        return 'type'
    if name in BUILTINS:
        return 'builtin'
    return 'identifier'
