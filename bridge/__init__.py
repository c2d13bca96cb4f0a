"""Ponte entre alertas do New Relic e o IBM Watson Workspace.

Este pacote contém:
- constants: variáveis de ambiente, tabela de respostas e cores
- auth: troca de credenciais (client_credentials) com o Watson Workspace
- services: montagem e envio de mensagens para um space
- verification: handshake de verificação do webhook (HMAC-SHA256)
- dispatch: roteamento de eventos do webhook por tipo
- echo: filtro de mensagens com a palavra-chave
- formatters: formatação dos alertas do New Relic
- controller: criação do Flask app e endpoints
"""
