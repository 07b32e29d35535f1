"""Well-known host lifecycle hooks.

Many mods patch these for their own initialization, so several owners on
the same hook is expected and harmless. Matched by exact, case-sensitive
method name. Each hook is listed with and without the 'Postfix' suffix,
which is how handler functions for them are commonly named.
"""

COMMON_LIFECYCLE_METHODS: frozenset[str] = frozenset(
    {
        # SubModule lifecycle methods
        "OnSubModuleLoadPostfix",
        "OnSubModuleLoad",
        "OnSubModuleUnloadedPostfix",
        "OnSubModuleUnloaded",
        "RegisterSubModuleObjectsPostfix",
        "RegisterSubModuleObjects",
        "AfterRegisterSubModuleObjectsPostfix",
        "AfterRegisterSubModuleObjects",
        # Game lifecycle methods
        "OnGameStartPostfix",
        "OnGameStart",
        "OnGameLoadedPostfix",
        "OnGameLoaded",
        "OnGameEndPostfix",
        "OnGameEnd",
        "OnGameInitializationFinishedPostfix",
        "OnGameInitializationFinished",
        "OnAfterGameInitializationFinishedPostfix",
        "OnAfterGameInitializationFinished",
        "InitializeGameStarterPostfix",
        "InitializeGameStarter",
        "DoLoadingPostfix",
        "DoLoading",
        # Campaign lifecycle methods
        "OnCampaignStartPostfix",
        "OnCampaignStart",
        "BeginGameStartPostfix",
        "BeginGameStart",
        "OnNewGameCreatedPostfix",
        "OnNewGameCreated",
        # Mission lifecycle methods
        "OnBeforeMissionBehaviourInitializePostfix",
        "OnBeforeMissionBehaviourInitialize",
        "OnMissionBehaviourInitializePostfix",
        "OnMissionBehaviourInitialize",
        # Application/Screen lifecycle methods
        "OnApplicationTickPostfix",
        "OnApplicationTick",
        "OnBeforeInitialModuleScreenSetAsRootPostfix",
        "OnBeforeInitialModuleScreenSetAsRoot",
        "AfterAsyncTickTickPostfix",
        "AfterAsyncTickTick",
        # Multiplayer lifecycle methods
        "OnMultiplayerGameStartPostfix",
        "OnMultiplayerGameStart",
        # Configuration lifecycle methods
        "OnConfigChangedPostfix",
        "OnConfigChanged",
        # Initial state methods
        "OnInitialStatePostfix",
        "OnInitialState",
    }
)
