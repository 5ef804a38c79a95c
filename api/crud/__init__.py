"""
    Outils d'accès aux données partagés par les API
"""
