# SPDX-License-Identifier: MIT

import nox


nox.options.sessions = ['mypy', 'test']
nox.options.reuse_existing_virtualenvs = True


@nox.session(python='3.8')
def mypy(session):
    session.install('.', 'mypy')

    session.run('mypy', '-p', 'elfhdr')


@nox.session(python=['3.8', '3.9', '3.10', '3.11', '3.12'])
def test(session):
    session.install('.[test]')

    session.run('pytest', *session.posargs)
