"""Best-practice guides for common Unreal C++ concepts."""

from __future__ import annotations

from unreal_index.core.errors import UnknownConceptError
from unreal_index.models import BestPracticeGuide

_SEARCH_BASE = "https://dev.epicgames.com/community/search?q="

_GUIDES: dict[str, BestPracticeGuide] = {
    "UPROPERTY": BestPracticeGuide(
        concept="UPROPERTY",
        description="Property declaration for Unreal reflection system",
        search_terms=["UPROPERTY specifier", "property reflection"],
        best_practices=[
            "Use appropriate specifiers (EditAnywhere, BlueprintReadWrite)",
            "Consider replication needs (Replicated, ReplicatedUsing)",
            "Group related properties with categories",
            "Use Meta tags for validation and UI customization",
            "Use UPROPERTY() for any member that needs GC, serialization, or Blueprint access",
        ],
        reference_notes=[
            "EditAnywhere - editable in property windows",
            "BlueprintReadWrite - read/write from Blueprint",
            "BlueprintReadOnly - read-only from Blueprint",
            "VisibleAnywhere - visible but not editable",
            "Replicated - replicated over network",
            "ReplicatedUsing=FuncName - callback on replication",
            "Transient - not serialized",
            'Category="Name" - organize in editor',
        ],
        examples=[
            'UPROPERTY(EditAnywhere, BlueprintReadWrite, Category = "Combat")\nfloat Health = 100.0f;',
            'UPROPERTY(Replicated, Meta = (ClampMin = "0.0", ClampMax = "1.0"))\nfloat Speed;',
            'UPROPERTY(VisibleAnywhere, BlueprintReadOnly, Category = "Components")\n'
            "UStaticMeshComponent* MeshComponent;",
        ],
        search_url=f"{_SEARCH_BASE}UPROPERTY+specifier+unreal+engine",
    ),
    "UFUNCTION": BestPracticeGuide(
        concept="UFUNCTION",
        description="Function declaration for Unreal reflection system",
        search_terms=["UFUNCTION specifier", "function reflection"],
        best_practices=[
            "Use BlueprintCallable for functions that can be called from Blueprints",
            "Use BlueprintPure for functions without side effects (const, no exec pin)",
            "Use BlueprintNativeEvent for C++ functions overridable in Blueprint",
            "Use BlueprintImplementableEvent for Blueprint-only implementation",
            "Add Category and DisplayName for better Blueprint organization",
        ],
        reference_notes=[
            "BlueprintCallable - callable from Blueprint",
            "BlueprintPure - no side effects, no exec pin",
            "BlueprintNativeEvent - overridable in Blueprint with C++ default",
            "BlueprintImplementableEvent - implemented only in Blueprint",
            "Server/Client/NetMulticast - RPC specifiers",
            "Reliable/Unreliable - RPC reliability",
            "WithValidation - RPC validation function",
        ],
        examples=[
            'UFUNCTION(BlueprintCallable, Category = "Combat")\nvoid TakeDamage(float DamageAmount);',
            'UFUNCTION(BlueprintPure, Category = "Stats")\nfloat GetHealthPercentage() const;',
            'UFUNCTION(BlueprintNativeEvent, Category = "Events")\nvoid OnDeath();',
            "UFUNCTION(Server, Reliable, WithValidation)\nvoid ServerFireWeapon();",
        ],
        search_url=f"{_SEARCH_BASE}UFUNCTION+specifier+unreal+engine",
    ),
    "Components": BestPracticeGuide(
        concept="Components",
        description="Component setup and management in Unreal Engine",
        search_terms=["UActorComponent", "CreateDefaultSubobject"],
        best_practices=[
            "Create components in constructor using CreateDefaultSubobject<T>()",
            "Set RootComponent first, then attach others with SetupAttachment()",
            "Use UPROPERTY() for components that need Blueprint access",
            "Consider component tick settings for performance",
            "Use VisibleAnywhere for components, not EditAnywhere",
        ],
        reference_notes=[
            "USceneComponent - base for transform hierarchy",
            "UStaticMeshComponent - static 3D meshes",
            "USkeletalMeshComponent - animated meshes",
            "UCapsuleComponent - collision capsule",
            "UBoxComponent - collision box",
            "USphereComponent - collision sphere",
            "UAudioComponent - 3D audio",
            "UPointLightComponent - point lights",
        ],
        examples=[
            "// In constructor:\n"
            'MeshComponent = CreateDefaultSubobject<UStaticMeshComponent>(TEXT("Mesh"));\n'
            "RootComponent = MeshComponent;",
            'CollisionComponent = CreateDefaultSubobject<UCapsuleComponent>(TEXT("Collision"));\n'
            "CollisionComponent->SetupAttachment(RootComponent);",
        ],
        search_url=f"{_SEARCH_BASE}components+CreateDefaultSubobject+unreal+engine",
    ),
    "Events": BestPracticeGuide(
        concept="Events",
        description="Event handling and delegation in Unreal Engine",
        search_terms=["delegates", "multicast delegate", "event dispatcher"],
        best_practices=[
            "Bind events in BeginPlay, unbind in EndPlay to avoid dangling references",
            "Use AddDynamic/RemoveDynamic for dynamic delegates (Blueprint-compatible)",
            "Use AddUObject for C++-only delegates (slightly faster)",
            "Check IsValid() before broadcasting if delegate might be unbound",
            "Use BlueprintAssignable for events that should be bindable in Blueprint",
        ],
        reference_notes=[
            "DECLARE_DELEGATE - single binding, C++ only",
            "DECLARE_MULTICAST_DELEGATE - multiple bindings, C++ only",
            "DECLARE_DYNAMIC_DELEGATE - single binding, Blueprint compatible",
            "DECLARE_DYNAMIC_MULTICAST_DELEGATE - multiple bindings, Blueprint compatible (most common)",
        ],
        examples=[
            "// Binding in BeginPlay:\n"
            "HealthComponent->OnHealthChanged.AddDynamic(this, &AMyActor::HandleHealthChanged);",
            "// Unbinding in EndPlay:\n"
            "HealthComponent->OnHealthChanged.RemoveDynamic(this, &AMyActor::HandleHealthChanged);",
            "// Broadcasting:\nOnHealthChanged.Broadcast(NewHealth);",
        ],
        search_url=f"{_SEARCH_BASE}delegates+events+unreal+engine",
    ),
    "Replication": BestPracticeGuide(
        concept="Replication",
        description="Network replication in Unreal Engine",
        search_terms=["network replication", "replicated property", "RPC"],
        best_practices=[
            "Mark properties with Replicated or ReplicatedUsing specifier",
            "Implement GetLifetimeReplicatedProps() for replicated properties",
            "Use DOREPLIFETIME or DOREPLIFETIME_CONDITION macros",
            "Consider replication conditions (COND_OwnerOnly, COND_SkipOwner, etc.)",
            "Use Reliable RPCs sparingly - prefer Unreliable for frequent calls",
            "Validate RPC parameters on server with WithValidation",
        ],
        reference_notes=[
            "COND_None - always replicate",
            "COND_InitialOnly - only on initial replication",
            "COND_OwnerOnly - only to owning connection",
            "COND_SkipOwner - to all except owner",
            "COND_SimulatedOnly - only to simulated proxies",
            "COND_AutonomousOnly - only to autonomous proxy",
        ],
        examples=[
            "// Property declaration:\nUPROPERTY(ReplicatedUsing = OnRep_Health)\nfloat Health;",
            "// Server RPC:\nUFUNCTION(Server, Reliable, WithValidation)\nvoid ServerTakeDamage(float Damage);",
        ],
        search_url=f"{_SEARCH_BASE}network+replication+unreal+engine",
    ),
    "Blueprints": BestPracticeGuide(
        concept="Blueprints",
        description="Blueprint integration and C++ exposure",
        search_terms=["Blueprint integration", "BlueprintType", "Blueprintable"],
        best_practices=[
            "Use UCLASS(Blueprintable) for classes that can be subclassed in Blueprint",
            "Use UCLASS(BlueprintType) for classes usable as variable types",
            "Add DisplayName and Category meta tags for better organization",
            "Use BlueprintNativeEvent for virtual functions with C++ defaults",
            "Expose only what Blueprint needs - keep implementation details in C++",
        ],
        reference_notes=[
            "Blueprintable - can be subclassed by Blueprint",
            "BlueprintType - can be used as variable type",
            "NotBlueprintable - explicitly prevent Blueprint subclassing",
            "Abstract - cannot be instantiated directly",
            "MinimalAPI - minimal reflection, faster compile",
        ],
        examples=[
            '// Blueprint implementable event:\nUFUNCTION(BlueprintImplementableEvent, Category = "Events")\n'
            "void OnPickedUp();",
        ],
        search_url=f"{_SEARCH_BASE}Blueprint+integration+C%2B%2B+unreal+engine",
    ),
}

CONCEPTS: tuple[str, ...] = tuple(_GUIDES)


def get_best_practices(concept: str) -> BestPracticeGuide:
    guide = _GUIDES.get(concept)
    if guide is None:
        raise UnknownConceptError(concept, list(CONCEPTS))
    return guide.model_copy(deep=True)
