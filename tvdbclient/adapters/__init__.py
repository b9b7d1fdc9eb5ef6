"""
Couche adaptateurs (infrastructure).

Sous-packages :
- api/ : Clients HTTP des deux dialectes TVDB, classification et decodage
- parsing/ : Conversion des documents XML en structures Python

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""
