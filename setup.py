from setuptools import setup

setup(name='texelcheck',
      version='0.1.0',
      description='Synthetic texel generation and validation for texture round-trip tests',
      long_description='''
Fill textures with deterministic texels and compare device readbacks channel by channel.
''',
      python_requires='>=3.8',
      install_requires=['numpy'],
      extras_require={'test': ['pytest']},
      packages=['texelcheck'],
      )
