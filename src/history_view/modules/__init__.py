"""📦 modules/: Bounded contexts específicos del negocio

✨ Estado actual:
   • versioning/ → Ventanas (prev, curr, next) sobre la historia de una entidad

📚 Cada módulo contiene sus propias capas Clean Architecture:
   • domain/        → Entidades, value objects y puertos del subdominio
   • application/   → Casos de uso
   • infrastructure/→ Adaptadores concretos (registros, JSON, observabilidad)
   • presentation/  → CLI
"""
