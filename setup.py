"""
Setup configuration for office2markdown package.
"""

from setuptools import setup

setup(
    name='office2markdown',
    packages=['office2markdown', 'office2markdown.utils',
              'office2markdown.parsers', 'office2markdown.converters'],
    version='1.0.0',
    description='A python utility to extract the text of docx, pptx, xlsx, '
                'odt, odp, ods and pdf files as structured markdown.',
    license='MIT',
    keywords=['python', 'docx', 'pptx', 'xlsx', 'odt', 'odp', 'ods', 'pdf',
              'text', 'markdown', 'convert', 'extract'],
    install_requires=[
        'pypdf>=3.0.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'office2markdown=office2markdown.cli:main',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Text Processing :: Markup',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    python_requires='>=3.8',
)
