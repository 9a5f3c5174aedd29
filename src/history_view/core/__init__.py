"""📦 core/: Building blocks universales del sistema

✨ ¿Qué pertenece aquí?
   • Value Objects matemáticos/lógicos reusables en CUALQUIER dominio:
     - Timestamp (instante UTC con centinela "fin de los tiempos")
   • Tipos primitivos validados
   • Helpers genéricos SIN dependencia de negocio

🚫 ¿Qué NO pertenece aquí?
   • Entidades específicas del dominio (Node, Way, VersionWindow)
   • Reglas de negocio (validez temporal de una versión, visibilidad)
   • Cualquier concepto que solo tenga sentido en TU proyecto

✅ Dónde poner lo específico del dominio:
   → modules/{bounded_context}/domain/

💡 Principio preventivo:
   Si no podrías reusar este código en un sistema de pagos O un e-commerce,
   probablemente NO pertenece a core/.
"""
